"""Value objects for Summarization domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptSpec:
    """Instructions placed before the commit details.

    Attributes:
        base_instructions: User supplied instructions; the default paragraph is
            used when empty
        extra_guidance: Optional additional guidance appended after the instructions
    """

    base_instructions: str | None = None
    extra_guidance: str | None = None


@dataclass(frozen=True)
class GenerationRequest:
    """Input data for a single inference call."""

    system_prompt: str
    user_prompt: str
    model: str
    temperature: float
    max_tokens: int


@dataclass(frozen=True)
class SummaryResult:
    """Outcome of summarizing a commit range.

    ``summary`` is empty and ``prompt`` is None when the range has no commits.
    """

    summary: str
    commit_ids: tuple[str, ...]
    from_id: str
    to_id: str
    prompt: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.commit_ids
