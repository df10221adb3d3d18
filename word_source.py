"""
word_source.py - Secret selection and guess membership for Bulls & Cows.

One WordSource is built per app and shared read-only by every session.
Randomness comes from an injected `random.Random`-like object so the
secret can be pinned down in tests or with SECRET_SEED.
"""

import random

from game_logic import WORD_LENGTH
from words import WORDS


def validate_word_list(words):
    """
    Check a word list is usable. Returns the words as an uppercase,
    de-duplicated list (original order kept).

    Raises ValueError for an empty list or any word that isn't exactly
    WORD_LENGTH letters A-Z.
    """
    cleaned = []
    seen = set()
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise ValueError(f"Word at index {index} is not a string: {word!r}")

        upper = word.strip().upper()
        if len(upper) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        if not (upper.isascii() and upper.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if upper not in seen:
            seen.add(upper)
            cleaned.append(upper)

    if not cleaned:
        raise ValueError("Word list cannot be empty")

    return cleaned


class WordSource:
    """Fixed list of playable words plus the RNG used to pick secrets."""

    def __init__(self, words=WORDS, rng=None):
        self._words = tuple(validate_word_list(words))
        self._lookup = frozenset(self._words)
        self._rng = rng if rng is not None else random.Random()

    def sample(self):
        """Pick a secret uniformly at random."""
        return self._rng.choice(self._words)

    def is_valid(self, candidate):
        """Case-insensitive exact membership. Anything not in the list is False."""
        if not isinstance(candidate, str):
            return False
        return candidate.upper() in self._lookup

    @property
    def words(self):
        return self._words

    def __len__(self):
        return len(self._words)

    def __contains__(self, candidate):
        return self.is_valid(candidate)
