"""Text helpers."""

from __future__ import annotations


def capitalize(word: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    if not word:
        return ""
    return word[0].upper() + word[1:]
