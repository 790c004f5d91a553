"""Prompt texts sent to the model."""

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert technical writer who transforms commit histories into clear, "
    "concise, and actionable summaries."
)

DEFAULT_INSTRUCTIONS = (
    "Summarize {count} commit(s) from {from_id} to {to_id}.",
    "Highlight user-facing changes, notable technical improvements, and any follow-up work.",
    "Return Markdown-formatted output with easy-to-scan headings or bullet points.",
)

EXTRA_GUIDANCE = "Additional guidance: {extra_guidance}"

COMMIT_DETAILS_HEADER = "Commit details:"

COMMIT_SEPARATOR = "\n\n---\n\n"

PARAGRAPH_SEPARATOR = "\n\n"
