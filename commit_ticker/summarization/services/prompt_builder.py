"""Assembling the user prompt from instructions and commit data."""

from collections.abc import Sequence

from commit_ticker.git.domain.entities import Commit
from commit_ticker.git.domain.value_objects import CommitRange
from commit_ticker.git.services.diff_truncation import truncate_diff
from commit_ticker.summarization.domain.value_objects import PromptSpec
from commit_ticker.summarization.prompts import (
    COMMIT_DETAILS_HEADER,
    COMMIT_SEPARATOR,
    DEFAULT_INSTRUCTIONS,
    EXTRA_GUIDANCE,
    PARAGRAPH_SEPARATOR,
)


def format_commit_section(commit: Commit, max_diff_chars: int) -> str:
    """Render one commit as ``Commit``/``SHA``/optional ``Body``/``Diff`` blocks."""
    parts = [
        f"Commit: {commit.title}",
        f"SHA: {commit.id}",
    ]

    if commit.body:
        parts.append(f"Body:\n{commit.body}")

    parts.append(f"Diff:\n{truncate_diff(commit.diff, max_diff_chars).text}")

    return PARAGRAPH_SEPARATOR.join(parts)


def default_instructions(count: int, commit_range: CommitRange) -> list[str]:
    return [
        paragraph.format(
            count=count, from_id=commit_range.from_id, to_id=commit_range.to_id
        )
        for paragraph in DEFAULT_INSTRUCTIONS
    ]


def build_prompt(
    prompt_spec: PromptSpec,
    commits: Sequence[Commit],
    max_diff_chars: int,
    commit_range: CommitRange,
) -> str:
    """
    Compose the user prompt.

    Paragraphs always come in this order: instructions, optional additional
    guidance, the ``Commit details:`` header, then the commit sections in the
    order given.

    Args:
        prompt_spec: Custom instructions and extra guidance
        commits: Commits ordered from oldest to newest
        max_diff_chars: Maximum characters kept from each diff
        commit_range: Resolved endpoints referenced by the default instructions

    Returns:
        Prompt text
    """
    paragraphs: list[str] = []

    if prompt_spec.base_instructions:
        paragraphs.append(prompt_spec.base_instructions)
    else:
        paragraphs.extend(default_instructions(len(commits), commit_range))

    if prompt_spec.extra_guidance:
        paragraphs.append(EXTRA_GUIDANCE.format(extra_guidance=prompt_spec.extra_guidance))

    paragraphs.append(COMMIT_DETAILS_HEADER)
    paragraphs.append(
        COMMIT_SEPARATOR.join(
            format_commit_section(commit, max_diff_chars) for commit in commits
        )
    )

    return PARAGRAPH_SEPARATOR.join(paragraphs)
