"""Folder name generation from a diceware-style word list."""

from __future__ import annotations

import secrets
from functools import lru_cache

from xkcdpass import xkcd_password as xp

WORD_COUNT = 4
SEPARATOR = "-"


@lru_cache(maxsize=1)
def _wordlist() -> tuple[str, ...]:
    # Alphabetic words only, so the separator never appears inside a word.
    words = xp.generate_wordlist(
        wordfile=xp.locate_wordfile(),
        min_length=3,
        max_length=9,
        valid_chars="[a-z]",
    )
    return tuple(words)


def generate_candidate_name(word_count: int = WORD_COUNT) -> str:
    """Return ``word_count`` random words joined by hyphens, e.g. ``apple-river-stone-lamp``.

    Each word is drawn independently. Uniqueness is not guaranteed here; the
    provisioner's reservation loop handles collisions.
    """
    words = _wordlist()
    return SEPARATOR.join(secrets.choice(words) for _ in range(word_count))
