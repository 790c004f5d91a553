"""Factory for creating LLM agent instances."""

from commit_ticker.core.config import ModelSettings
from commit_ticker.summarization.repositories.implementations import (
    GitHubModelsAgent,
    LangChainClaudeAgent,
    LangChainOpenAIAgent,
)
from commit_ticker.summarization.repositories.interfaces import LLMAgentRepository


def create_llm_agent(settings: ModelSettings) -> LLMAgentRepository:
    """
    Create an LLM agent instance for the configured provider.

    Args:
        settings: Validated model settings (provider is already canonical)

    Returns:
        LLM agent instance (GitHub Models, OpenAI or Claude)

    Raises:
        ValueError: If the API key is missing
    """
    match settings.provider:
        case "github":
            return GitHubModelsAgent(api_key=settings.api_key, timeout=settings.timeout)
        case "openai":
            return LangChainOpenAIAgent(api_key=settings.api_key, timeout=settings.timeout)
        case "anthropic":
            return LangChainClaudeAgent(api_key=settings.api_key, timeout=settings.timeout)
        case _:
            raise ValueError(f"Invalid LLM provider: {settings.provider}")
