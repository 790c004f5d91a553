"""Repository interfaces for LLM summarization operations."""

from abc import ABC, abstractmethod

from commit_ticker.summarization.domain.value_objects import GenerationRequest


class LLMAgentRepository(ABC):
    """Interface for LLM-based text generation."""

    @abstractmethod
    def generate(self, request: GenerationRequest) -> str:
        """
        Send a system and user prompt to the model and return its answer.

        Args:
            request: Prompts and sampling parameters

        Returns:
            Generated text, stripped and non-empty

        Raises:
            ModelError: If the call fails or the model returns no content
        """
        ...
