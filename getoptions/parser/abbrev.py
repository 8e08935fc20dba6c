# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Computes unambiguous abbreviations for a set of option spellings.

Given `["help", "host", "verbose"]` the result maps `"he"`, `"hel"`,
`"ho"`, `"hos"`, `"v"`, `"ve"`, ... to their full spelling, and each word to
itself. `"h"` is left out because both `help` and `host` start with it.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable


def abbreviations(words: Iterable[str]) -> dict[str, str]:
    """
    Map every unambiguous non-empty prefix to the single word it belongs to.

    A prefix counts once for every distinct word it starts, the word itself
    included, so a word that is a prefix of another word never abbreviates the
    longer one. Every word always maps to itself.

    Args:
        words (Iterable[str]): Candidate spellings. Duplicates are ignored.

    Returns:
        dict[str, str]: Prefix to full word.
    """
    unique = list(dict.fromkeys(word for word in words if word))
    counts: Counter[str] = Counter(
        word[:length] for word in unique for length in range(1, len(word) + 1)
    )
    table: dict[str, str] = {}
    for word in unique:
        for length in range(len(word) - 1, 0, -1):
            prefix = word[:length]
            if counts[prefix] == 1:
                table[prefix] = word
    for word in unique:
        table[word] = word
    return table
