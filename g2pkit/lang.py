"""Language-specific text handling."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from .text import TextProcessor

_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+", re.IGNORECASE)


class Language(ABC):
    """Text handling that a language must provide."""

    @abstractmethod
    def normalize_text(self, text: str) -> str:
        """Return the normalised form of ``text``."""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Split ``text`` into words."""

    @abstractmethod
    def get_stress_pattern(self, word: str) -> list[int]:
        """Return the indices of stressed syllables in ``word``."""


def _syllable_count(word: str) -> int:
    """Estimate the syllables in ``word``; every word counts as at least one."""
    return max(1, len(_VOWEL_GROUP_RE.findall(word)))


class English(Language):
    """English text handling."""

    def __init__(self) -> None:
        self._processor = TextProcessor()

    def normalize_text(self, text: str) -> str:
        return self._processor.normalize(text)

    def tokenize(self, text: str) -> list[str]:
        return self._processor.tokenize(text)

    def get_stress_pattern(self, word: str) -> list[int]:
        """Return the stressed syllable indices: the first syllable only."""
        syllables = range(_syllable_count(word))
        return [index for index in syllables if index == 0]