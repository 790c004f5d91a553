"""Bounding diff text to a maximum number of characters."""

from commit_ticker.git.domain.value_objects import TruncatedDiff

TRUNCATION_MARKER = "\n\n[Diff truncated to the first {limit} characters]"


def truncation_marker(limit: int) -> str:
    """Return the marker appended to a diff cut at ``limit`` characters."""
    return TRUNCATION_MARKER.format(limit=limit)


def truncate_diff(text: str, limit: int) -> TruncatedDiff:
    """
    Keep at most ``limit`` characters of a diff.

    Cuts on character count, so lines and hunks may be split. A non-positive
    limit disables truncation.

    Args:
        text: Diff text
        limit: Maximum number of characters to keep

    Returns:
        TruncatedDiff with the marker appended when the text was cut
    """
    if limit <= 0 or len(text) <= limit:
        return TruncatedDiff(text=text, was_truncated=False)

    return TruncatedDiff(text=text[:limit] + truncation_marker(limit), was_truncated=True)
