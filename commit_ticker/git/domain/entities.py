"""Git domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Commit:
    """Commit entity.

    Attributes:
        id: Canonical commit hash
        title: Subject line of the commit message
        body: Remainder of the message, trimmed (empty when absent)
        diff: Patch text as produced by git, untouched
    """

    id: str
    title: str
    body: str
    diff: str
