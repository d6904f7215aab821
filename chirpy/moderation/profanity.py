"""
Profanity filter: exact-token, case-insensitive redaction.

Text is split on single spaces (so runs of spaces yield empty tokens that
survive the round trip), each token whose lowercase form is a banned word is
replaced by MASK, and the tokens are rejoined with single spaces. Tokens that
merely contain a banned word are left alone.
"""

from __future__ import annotations

from collections.abc import Iterable

from chirpy.config.settings import DEFAULT_PROFANE_WORDS

MASK = "****"


class ProfanityFilter:
    """Redacts banned words from chirp text."""

    def __init__(self, banned_words: Iterable[str] = DEFAULT_PROFANE_WORDS) -> None:
        self.banned_words = frozenset(w.strip().lower() for w in banned_words if w.strip())

    def filter(self, text: str) -> str:
        tokens = text.split(" ")
        return " ".join(MASK if tok.lower() in self.banned_words else tok for tok in tokens)

    __call__ = filter

    def __repr__(self) -> str:
        return f"ProfanityFilter(banned_words={sorted(self.banned_words)!r})"
