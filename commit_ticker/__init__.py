"""Summarize a range of git commits with an LLM."""

__version__ = "0.1.0"
