"""Summarization service for orchestrating commit range analysis."""

from commit_ticker.core.config import SummaryConfig
from commit_ticker.core.logging import get_logger
from commit_ticker.git.services.git_service import GitService
from commit_ticker.summarization.domain.value_objects import (
    GenerationRequest,
    SummaryResult,
)
from commit_ticker.summarization.repositories.interfaces import LLMAgentRepository
from commit_ticker.summarization.services.prompt_builder import build_prompt

logger = get_logger(__name__)


class SummarizationService:
    """Service for turning a commit range into a summary."""

    def __init__(
        self,
        git_service: GitService,
        llm_agent: LLMAgentRepository | None = None,
    ) -> None:
        """
        Initialize SummarizationService.

        Args:
            git_service: Service for fetching git commit data
            llm_agent: Repository for LLM-based generation. May be None when
                only prompts are built.
        """
        self._git_service = git_service
        self._llm_agent = llm_agent

    def summarize_range(self, config: SummaryConfig) -> SummaryResult:
        """
        Summarize the commits between ``config.start_ref`` and ``config.end_ref``.

        Resolves both references, enumerates the range, extracts every commit
        in order, builds the prompt and asks the model for a summary. An empty
        range returns an empty summary without building a prompt or calling the
        model. With ``config.prompt_only`` the prompt is returned as the summary.

        Args:
            config: Validated run configuration

        Returns:
            SummaryResult for the range

        Raises:
            ResolutionError: If a reference cannot be resolved
            RangeError: If the range cannot be listed
            ExtractionError: If a commit cannot be read
            ModelError: If the model call fails or returns nothing
        """
        commit_range = self._git_service.resolve_range(
            config.start_ref, config.end_ref, config.include_start_commit
        )
        commit_ids = self._git_service.enumerate_range(commit_range)

        if not commit_ids:
            logger.info(
                f"No commits found between {commit_range.from_id} and {commit_range.to_id}."
            )
            return SummaryResult(
                summary="",
                commit_ids=(),
                from_id=commit_range.from_id,
                to_id=commit_range.to_id,
            )

        commits = self._git_service.extract_commits(commit_ids, config.path_filter)
        prompt = build_prompt(config.prompt, commits, config.max_diff_chars, commit_range)

        if config.prompt_only:
            summary = prompt
        else:
            summary = self._generate(config, prompt)

        return SummaryResult(
            summary=summary,
            commit_ids=commit_ids,
            from_id=commit_range.from_id,
            to_id=commit_range.to_id,
            prompt=prompt,
        )

    def _generate(self, config: SummaryConfig, prompt: str) -> str:
        if self._llm_agent is None:
            raise RuntimeError("No LLM agent configured for summarization")

        request = GenerationRequest(
            system_prompt=config.model.system_prompt,
            user_prompt=prompt,
            model=config.model.model,
            temperature=config.model.temperature,
            max_tokens=config.model.max_output_tokens,
        )
        return self._llm_agent.generate(request)
