"""LangChain agent tests"""

import pytest
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from commit_ticker.core.config import ModelSettings
from commit_ticker.core.errors import ModelError
from commit_ticker.summarization.domain.value_objects import GenerationRequest
from commit_ticker.summarization.repositories.base_langchain_agent import BaseLangChainAgent
from commit_ticker.summarization.repositories.factory import create_llm_agent
from commit_ticker.summarization.repositories.implementations import (
    GITHUB_MODELS_ENDPOINT,
    GitHubModelsAgent,
    LangChainClaudeAgent,
    LangChainOpenAIAgent,
)

REQUEST = GenerationRequest(
    system_prompt="You summarize commits.",
    user_prompt="Commit details:\n\nCommit: Fix bug",
    model="openai/gpt-4o-mini",
    temperature=0.2,
    max_tokens=800,
)


class FakeAgent(BaseLangChainAgent):
    """Agent backed by a fake chat model"""

    def __init__(self, llm: BaseChatModel) -> None:
        super().__init__(api_key="test-key")
        self.llm = llm
        self.created_for: list[GenerationRequest] = []

    def _create_llm(self, request: GenerationRequest) -> BaseChatModel:
        self.created_for.append(request)
        return self.llm


class FailingChatModel(FakeListChatModel):
    """Chat model whose every call fails"""

    def invoke(self, *args, **kwargs):
        raise ConnectionError("status 503: upstream unavailable")


class RecordingChatModel(FakeListChatModel):
    """Chat model that remembers the messages it received"""

    sent: list = []

    def invoke(self, input, *args, **kwargs):
        self.sent.append(input)
        return super().invoke(input, *args, **kwargs)


class TestBaseLangChainAgent:
    """BaseLangChainAgent.generate tests"""

    def test_returns_stripped_text(self):
        """Model output is stripped of surrounding whitespace"""
        agent = FakeAgent(FakeListChatModel(responses=["\n## Summary\n\n- Fixed a bug\n  "]))

        assert agent.generate(REQUEST) == "## Summary\n\n- Fixed a bug"
        assert agent.created_for == [REQUEST]

    def test_empty_response_raises(self):
        """Blank responses raise ModelError"""
        agent = FakeAgent(FakeListChatModel(responses=["   "]))

        with pytest.raises(ModelError, match="did not include any content"):
            agent.generate(REQUEST)

    def test_call_failure_raises(self):
        """Transport failures are wrapped in ModelError"""
        agent = FakeAgent(FailingChatModel(responses=[]))

        with pytest.raises(ModelError, match="503") as exc_info:
            agent.generate(REQUEST)

        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_messages_sent(self):
        """System and user prompts are sent as two messages"""
        llm = RecordingChatModel(responses=["ok"])

        FakeAgent(llm).generate(REQUEST)

        assert llm.sent == [
            [
                SystemMessage(content="You summarize commits."),
                HumanMessage(content="Commit details:\n\nCommit: Fix bug"),
            ]
        ]

    def test_list_content_is_flattened(self):
        """Content blocks are joined into plain text"""
        text = BaseLangChainAgent._extract_text(
            ["Intro ", {"type": "text", "text": "body"}, {"type": "tool_use"}]
        )

        assert text == "Intro body"

    def test_missing_api_key(self):
        """An empty API key is rejected at construction"""
        with pytest.raises(ValueError, match="API key"):
            GitHubModelsAgent(api_key="")


class TestProviders:
    """Provider implementation tests"""

    def test_github_models_uses_inference_endpoint(self):
        """GitHub Models goes through the OpenAI client with the GitHub endpoint"""
        llm = GitHubModelsAgent(api_key="ghs_test")._create_llm(REQUEST)

        assert isinstance(llm, ChatOpenAI)
        assert llm.openai_api_base == GITHUB_MODELS_ENDPOINT
        assert llm.model_name == "openai/gpt-4o-mini"
        assert llm.temperature == 0.2
        assert llm.max_retries == 0

    def test_openai_uses_default_endpoint(self):
        """The OpenAI agent does not override the endpoint"""
        llm = LangChainOpenAIAgent(api_key="sk-test")._create_llm(REQUEST)

        assert isinstance(llm, ChatOpenAI)
        assert llm.openai_api_base != GITHUB_MODELS_ENDPOINT

    @pytest.mark.parametrize(
        ("provider", "expected"),
        [
            ("github", GitHubModelsAgent),
            ("openai", LangChainOpenAIAgent),
            ("anthropic", LangChainClaudeAgent),
        ],
    )
    def test_factory(self, provider, expected):
        """The factory picks the agent of the configured provider"""
        agent = create_llm_agent(ModelSettings(provider=provider, api_key="key"))

        assert isinstance(agent, expected)
