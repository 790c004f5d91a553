"""Concrete implementations of LLM summarization using LangChain."""

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from commit_ticker.summarization.domain.value_objects import GenerationRequest
from commit_ticker.summarization.repositories.base_langchain_agent import (
    BaseLangChainAgent,
)

GITHUB_MODELS_ENDPOINT = "https://models.github.ai/inference"


class GitHubModelsAgent(BaseLangChainAgent):
    """GitHub Models inference API through its OpenAI compatible endpoint."""

    provider_name = "GitHub Models"

    def __init__(
        self,
        api_key: str,
        timeout: float | None = None,
        base_url: str = GITHUB_MODELS_ENDPOINT,
    ) -> None:
        """
        Initialize the GitHub Models agent.

        Args:
            api_key: GitHub token with access to GitHub Models
            timeout: Request timeout in seconds
            base_url: Inference endpoint, without the /chat/completions suffix
        """
        super().__init__(api_key, timeout)
        self._base_url = base_url

    def _create_llm(self, request: GenerationRequest) -> BaseChatModel:
        return ChatOpenAI(  # type: ignore[call-arg]
            model=request.model,
            api_key=self._api_key,
            base_url=self._base_url,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            timeout=self._timeout,
            max_retries=0,
        )


class LangChainOpenAIAgent(BaseLangChainAgent):
    """LangChain implementation using OpenAI for commit summarization."""

    provider_name = "OpenAI"

    def _create_llm(self, request: GenerationRequest) -> BaseChatModel:
        return ChatOpenAI(  # type: ignore[call-arg]
            model=request.model,
            api_key=self._api_key,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            timeout=self._timeout,
            max_retries=0,
        )


class LangChainClaudeAgent(BaseLangChainAgent):
    """LangChain implementation using Claude for commit summarization."""

    provider_name = "Anthropic"

    def _create_llm(self, request: GenerationRequest) -> BaseChatModel:
        return ChatAnthropic(  # type: ignore[call-arg]
            model=request.model,
            api_key=self._api_key,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            timeout=self._timeout,
            max_retries=0,
        )
