"""Base class for LangChain-based LLM agents."""

from abc import ABC, abstractmethod

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from commit_ticker.core.errors import ModelError
from commit_ticker.core.logging import get_logger
from commit_ticker.summarization.domain.value_objects import GenerationRequest
from commit_ticker.summarization.repositories.interfaces import LLMAgentRepository

logger = get_logger(__name__)


class BaseLangChainAgent(LLMAgentRepository, ABC):
    """Base class for LangChain-based summarization agents.

    Subclasses only build the chat model; the request is a single blocking
    call with retries disabled.
    """

    provider_name: str = "the model provider"

    def __init__(self, api_key: str, timeout: float | None = None) -> None:
        """
        Initialize the base agent.

        Args:
            api_key: Credential for the provider
            timeout: Request timeout in seconds
        """
        if not api_key:
            raise ValueError(f"An API key is required to call {self.provider_name}.")
        self._api_key = api_key
        self._timeout = timeout

    @abstractmethod
    def _create_llm(self, request: GenerationRequest) -> BaseChatModel:
        """Build the chat model configured for ``request``."""
        ...

    def generate(self, request: GenerationRequest) -> str:
        """
        Send a system and user prompt to the model and return its answer.

        Args:
            request: Prompts and sampling parameters

        Returns:
            Generated text, stripped

        Raises:
            ModelError: If the LLM API call fails or returns no content
        """
        messages = [
            SystemMessage(content=request.system_prompt),
            HumanMessage(content=request.user_prompt),
        ]

        logger.info(
            f'Requesting commit summary from model "{request.model}"...',
            provider=self.provider_name,
            prompt_chars=len(request.user_prompt),
        )
        try:
            response = self._create_llm(request).invoke(messages)
        except Exception as e:
            raise ModelError(f"Model request failed: {e}", detail=str(e)) from e

        content = self._extract_text(response.content).strip()
        if not content:
            raise ModelError("Model response did not include any content.")
        return content

    @staticmethod
    def _extract_text(content: object) -> str:
        """Flatten LangChain message content into plain text."""
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            # Content blocks: plain strings or dicts such as {"type": "text", "text": ...}
            return "".join(
                item if isinstance(item, str) else str(item.get("text", ""))
                for item in content
                if isinstance(item, (str, dict))
            )
        return ""
