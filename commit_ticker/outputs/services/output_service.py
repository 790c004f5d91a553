"""Service for publishing summaries."""

from pathlib import Path
from typing import TextIO

from commit_ticker.outputs.domain.value_objects import ActionOutput, StepSummary
from commit_ticker.outputs.repositories.implementations import GitHubActionsRepository
from commit_ticker.summarization.domain.value_objects import SummaryResult

SUMMARY_OUTPUT_NAME = "summary"
PROMPT_OUTPUT_NAME = "prompt"
STEP_SUMMARY_TITLE = "AI Generated Commit Summary"


class OutputService:
    """Service for orchestrating output operations."""

    def __init__(self, actions_repository: GitHubActionsRepository, stream: TextIO) -> None:
        """Initialize the output service.

        Args:
            actions_repository: Repository for GitHub Actions outputs
            stream: Stream the summary is printed to
        """
        self._actions_repository = actions_repository
        self._stream = stream

    def publish(self, result: SummaryResult, output_file: Path | None = None) -> None:
        """Publish a summary to every configured destination.

        An empty range only sets an empty ``summary`` output and emits a notice.

        Args:
            result: The summarization result
            output_file: Optional markdown file to write the summary to
        """
        self._actions_repository.set_output(
            ActionOutput(name=SUMMARY_OUTPUT_NAME, value=result.summary)
        )

        if result.is_empty:
            self._actions_repository.notice(
                f"No commits found between {result.from_id} and {result.to_id}."
            )
            return

        self._print_summary(result.summary)
        self._actions_repository.append_summary(
            StepSummary(text=result.summary, title=STEP_SUMMARY_TITLE)
        )

        if output_file is not None:
            self._write_summary_file(output_file, result.summary)

    def publish_prompt(self, result: SummaryResult, output_file: Path | None = None) -> None:
        """Publish the assembled prompt instead of a summary.

        Args:
            result: The result of a prompt-only run
            output_file: Optional file to write the prompt to
        """
        prompt = result.prompt or ""
        self._actions_repository.set_output(ActionOutput(name=PROMPT_OUTPUT_NAME, value=prompt))

        if result.is_empty:
            self._actions_repository.notice(
                f"No commits found between {result.from_id} and {result.to_id}."
            )
            return

        self._stream.write(f"{prompt}\n")
        if output_file is not None:
            self._write_summary_file(output_file, prompt)

    def fail(self, message: str) -> None:
        """Report a fatal error to the runner."""
        self._actions_repository.error(message)

    def _print_summary(self, summary: str) -> None:
        self._stream.write("--- Commit Summary ---\n\n")
        self._stream.write(f"{summary}\n")
        self._stream.write("\n--- End of Summary ---\n")

    @staticmethod
    def _write_summary_file(output_file: Path, summary: str) -> None:
        """
        Write the summary to a markdown file.

        Args:
            output_file: Destination file, parent directories are created
            summary: Markdown summary content
        """
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with output_file.open("w", encoding="utf-8") as f:
            f.write(summary)
            if not summary.endswith("\n"):
                f.write("\n")
