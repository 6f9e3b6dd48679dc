"""Subsequences of a string."""

from __future__ import annotations

__all__ = ["subsequences", "sorted_subsequences"]


def subsequences(text: str) -> list[str]:
    """Every subsequence of ``text``, including the empty one.

    Those containing the first character come first, each group ordered the
    same way recursively.
    """
    result = [""]
    for char in reversed(text):
        result = [char + rest for rest in result] + result
    return result


def sorted_subsequences(text: str) -> list[str]:
    """Every subsequence of ``text`` in lexicographic order."""
    return sorted(subsequences(text))