"""Utility functions for kanacards application."""

import random
import re


def derive_pool(all_items, active_groups, active_types) -> list:
    """Items whose group and type are both active, in dataset order."""
    return [
        item for item in all_items
        if item.group in active_groups and item.type in active_types
    ]


def shuffle(items, rng=None) -> list:
    """Return a shuffled copy of items (Fisher-Yates).

    rng only needs a randint(a, b) method; defaults to the random module.
    """
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def first_code_point(text: str) -> int | None:
    """Code point of the first character, or None for an empty string."""
    if not text:
        return None
    return ord(text[0])


def is_kana(code_point: int) -> bool:
    """Hiragana, Katakana or Katakana Phonetic Extensions block."""
    return (
        0x3040 <= code_point <= 0x309F
        or 0x30A0 <= code_point <= 0x30FF
        or 0x31F0 <= code_point <= 0x31FF
    )


def count_strokes(svg: str) -> int:
    """Count the animated stroke paths in an animCJK diagram."""
    return len(re.findall(r'<path[^>]*\bclip-path=', svg))
