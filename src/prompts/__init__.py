"""Prompt templates for AI operations."""

from .spam import (
    CLASSIFY_SPAM_EXAMPLES,
    CLASSIFY_SPAM_SYSTEM,
    CLASSIFY_SPAM_TOOL,
    CLASSIFY_SPAM_USER,
    EXPLAIN_SPAM_SYSTEM,
    EXPLAIN_SPAM_USER,
)

__all__ = [
    "CLASSIFY_SPAM_SYSTEM",
    "CLASSIFY_SPAM_USER",
    "CLASSIFY_SPAM_EXAMPLES",
    "CLASSIFY_SPAM_TOOL",
    "EXPLAIN_SPAM_SYSTEM",
    "EXPLAIN_SPAM_USER",
]
