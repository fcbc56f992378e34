"""
Helper utility functions for the Transcript Studio application.
"""

import re
from typing import Iterable


def is_blank(text: str) -> bool:
    """Return True for None, empty or whitespace-only text."""
    return not text or not text.strip()


def count_words(text: str) -> int:
    """
    Count whitespace-separated words.

    Args:
        text: Text to count

    Returns:
        Number of words, 0 for blank text
    """
    if is_blank(text):
        return 0
    return len(re.split(r"\s+", text.strip()))


def format_bullets(items: Iterable[str], prefix: str = "- ") -> str:
    """
    Render items as one bullet per line.

    Args:
        items: Lines to render
        prefix: Bullet marker

    Returns:
        Newline-joined bullet list
    """
    return "\n".join(f"{prefix}{item}" for item in items)


def target_word_count(duration_minutes: int, words_per_minute: int) -> int:
    """Number of words that fill ``duration_minutes`` of narration."""
    return duration_minutes * words_per_minute
