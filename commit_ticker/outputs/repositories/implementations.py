"""Concrete implementations of output repositories."""

import uuid
from pathlib import Path
from typing import TextIO

from commit_ticker.core.logging import get_logger
from commit_ticker.outputs.domain.value_objects import ActionOutput, StepSummary

logger = get_logger(__name__)


def _escape_command_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsRepository:
    """Write outputs, job summaries and workflow commands for the Actions runner.

    Paths come from the ``GITHUB_OUTPUT`` and ``GITHUB_STEP_SUMMARY`` variables
    read at the boundary. A missing path means the value is only logged.
    """

    def __init__(
        self,
        stream: TextIO,
        output_path: Path | None = None,
        summary_path: Path | None = None,
        in_actions: bool = False,
    ) -> None:
        """Initialize the repository.

        Args:
            stream: Stream receiving workflow commands (usually stdout)
            output_path: File backing step outputs
            summary_path: File backing the job summary
            in_actions: Whether workflow commands should be emitted
        """
        self._stream = stream
        self._output_path = output_path
        self._summary_path = summary_path
        self._in_actions = in_actions

    def set_output(self, output: ActionOutput) -> None:
        """Append an output using the multiline delimiter syntax.

        Args:
            output: The output to set
        """
        if self._output_path is None:
            logger.debug("GITHUB_OUTPUT not set, skipping output", name=output.name)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        # The delimiter must not occur in the value
        while delimiter in output.value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"

        with self._output_path.open("a", encoding="utf-8") as f:
            f.write(f"{output.name}<<{delimiter}\n{output.value}\n{delimiter}\n")

    def append_summary(self, summary: StepSummary) -> None:
        """Append markdown to the job summary.

        Args:
            summary: The summary to append
        """
        if self._summary_path is None:
            logger.debug("GITHUB_STEP_SUMMARY not set, skipping job summary")
            return

        with self._summary_path.open("a", encoding="utf-8") as f:
            f.write(summary.render())
            f.write("\n")

    def notice(self, message: str) -> None:
        if self._in_actions:
            self._stream.write(f"::notice::{_escape_command_data(message)}\n")

    def error(self, message: str) -> None:
        if self._in_actions:
            self._stream.write(f"::error::{_escape_command_data(message)}\n")
