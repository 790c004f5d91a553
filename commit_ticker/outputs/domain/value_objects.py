"""Value objects for the outputs domain."""

import re
from dataclasses import dataclass

_OUTPUT_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


@dataclass(frozen=True)
class ActionOutput:
    """Value object representing a GitHub Actions step output.

    Attributes:
        name: Output name, as referenced by ``steps.<id>.outputs.<name>``
        value: Output value, may span several lines
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        """Validate the output name."""
        if not self.name:
            raise ValueError("Output name cannot be empty")

        if not _OUTPUT_NAME.match(self.name):
            raise ValueError(
                f"Invalid output name '{self.name}'. "
                "Output names can only contain letters, numbers, hyphens, and underscores "
                "and must not start with a number"
            )


@dataclass(frozen=True)
class StepSummary:
    """Value object representing markdown appended to the job summary.

    Attributes:
        text: The summary text in markdown format
        title: Optional level 2 heading placed above the text
    """

    text: str
    title: str | None = None

    def __post_init__(self) -> None:
        """Validate the summary."""
        if not self.text:
            raise ValueError("Step summary text cannot be empty")

    def render(self) -> str:
        if self.title:
            return f"## {self.title}\n\n{self.text}"
        return self.text
