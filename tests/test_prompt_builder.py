"""Prompt assembly tests"""

from commit_ticker.git.domain.entities import Commit
from commit_ticker.git.domain.value_objects import CommitRange
from commit_ticker.git.services.diff_truncation import truncation_marker
from commit_ticker.summarization.domain.value_objects import PromptSpec
from commit_ticker.summarization.services.prompt_builder import (
    build_prompt,
    format_commit_section,
)

RANGE = CommitRange(from_id="a1", to_id="d4")


def make_commit(commit_id: str, body: str = "", diff: str = "+x\n") -> Commit:
    return Commit(id=commit_id, title=f"Title {commit_id}", body=body, diff=diff)


class TestFormatCommitSection:
    """format_commit_section tests"""

    def test_section_without_body(self):
        """No Body block when the body is empty"""
        section = format_commit_section(make_commit("b2"), 6000)

        assert section == "Commit: Title b2\n\nSHA: b2\n\nDiff:\n+x\n"
        assert "Body:" not in section

    def test_section_with_body(self):
        """Body sits verbatim between SHA and Diff"""
        section = format_commit_section(make_commit("c3", body="Line 1\nLine 2"), 6000)

        assert section == "Commit: Title c3\n\nSHA: c3\n\nBody:\nLine 1\nLine 2\n\nDiff:\n+x\n"

    def test_diff_is_truncated(self):
        """Diffs over the limit are cut and marked"""
        section = format_commit_section(make_commit("e5", diff="0123456789"), 4)

        assert section.endswith("Diff:\n0123" + truncation_marker(4))


class TestBuildPrompt:
    """build_prompt tests"""

    def test_default_instructions(self):
        """Default instructions reference the count and both endpoints"""
        prompt = build_prompt(PromptSpec(), [make_commit("a1"), make_commit("d4")], 6000, RANGE)

        paragraphs = prompt.split("\n\n")
        assert paragraphs[0] == "Summarize 2 commit(s) from a1 to d4."
        assert paragraphs[1] == (
            "Highlight user-facing changes, notable technical improvements, "
            "and any follow-up work."
        )
        assert paragraphs[2] == (
            "Return Markdown-formatted output with easy-to-scan headings or bullet points."
        )
        assert paragraphs[3] == "Commit details:"

    def test_custom_instructions_replace_default(self):
        """User instructions are used verbatim"""
        prompt = build_prompt(
            PromptSpec(base_instructions="Write release notes."), [make_commit("a1")], 6000, RANGE
        )

        assert prompt.startswith("Write release notes.\n\nCommit details:\n\n")
        assert "Summarize" not in prompt

    def test_paragraph_order_with_guidance(self):
        """Instructions, guidance, header and sections keep their order"""
        prompt = build_prompt(
            PromptSpec(base_instructions="Be brief.", extra_guidance="Mention tests."),
            [make_commit("a1")],
            6000,
            RANGE,
        )

        assert prompt == (
            "Be brief.\n\n"
            "Additional guidance: Mention tests.\n\n"
            "Commit details:\n\n"
            "Commit: Title a1\n\nSHA: a1\n\nDiff:\n+x\n"
        )

    def test_no_guidance_paragraph_when_absent(self):
        """Empty guidance adds nothing"""
        prompt = build_prompt(PromptSpec(extra_guidance=""), [make_commit("a1")], 6000, RANGE)

        assert "Additional guidance" not in prompt

    def test_sections_joined_in_order(self):
        """Sections are joined with the separator in enumerated order"""
        commits = [make_commit(commit_id) for commit_id in ("a1", "b2", "c3", "d4")]

        prompt = build_prompt(PromptSpec(base_instructions="Go."), commits, 6000, RANGE)

        details = prompt.split("Commit details:\n\n", 1)[1]
        sections = details.split("\n\n---\n\n")
        assert [section.split("\n")[0] for section in sections] == [
            "Commit: Title a1",
            "Commit: Title b2",
            "Commit: Title c3",
            "Commit: Title d4",
        ]

    def test_is_deterministic(self):
        """Same inputs give the same prompt"""
        commits = [make_commit("a1", body="b"), make_commit("b2")]

        assert build_prompt(PromptSpec(), commits, 10, RANGE) == build_prompt(
            PromptSpec(), commits, 10, RANGE
        )
