"""Value objects for Git domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitRange:
    """Resolved endpoints of a commit range."""

    from_id: str
    to_id: str
    include_start: bool = True


@dataclass(frozen=True)
class PathFilter:
    """Ordered path patterns restricting which file changes appear in a diff.

    An empty filter means no restriction.
    """

    patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate the patterns."""
        if any(not pattern for pattern in self.patterns):
            raise ValueError("Path patterns cannot be empty strings")

    def __bool__(self) -> bool:
        return bool(self.patterns)

    @classmethod
    def from_lines(cls, text: str | None) -> "PathFilter":
        """Build a filter from newline-delimited text, dropping blank lines."""
        if not text:
            return cls()
        return cls(tuple(line.strip() for line in text.splitlines() if line.strip()))


@dataclass(frozen=True)
class TruncatedDiff:
    """Diff text bounded to a character limit."""

    text: str
    was_truncated: bool
