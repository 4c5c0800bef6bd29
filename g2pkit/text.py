"""Text normalisation and tokenisation ahead of phoneme conversion."""

from __future__ import annotations

import re

_NUMBER_WORDS: dict[str, str] = {
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
    "10": "ten",
    "11": "eleven",
    "12": "twelve",
    "13": "thirteen",
    "14": "fourteen",
    "15": "fifteen",
    "16": "sixteen",
    "17": "seventeen",
    "18": "eighteen",
    "19": "nineteen",
    "20": "twenty",
}

_ABBREVIATIONS: dict[str, str] = {
    "dr.": "doctor",
    "mr.": "mister",
    "mrs.": "misses",
    "ms.": "miss",
    "prof.": "professor",
    "st.": "street",
    "ave.": "avenue",
    "blvd.": "boulevard",
    "etc.": "etcetera",
    "vs.": "versus",
}

_NUMBER_RE = re.compile(r"\b\d+\b")
_PUNCT_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def _trim_non_alpha(word: str) -> str:
    start = next((i for i, ch in enumerate(word) if ch.isalpha()), len(word))
    end = next(
        (i + 1 for i in range(len(word) - 1, start - 1, -1) if word[i].isalpha()),
        start,
    )
    return word[start:end]


class TextProcessor:
    """Lower-cases text, expands abbreviations and numbers, and splits words."""

    def __init__(self) -> None:
        self.number_words = dict(_NUMBER_WORDS)
        self.abbreviations = dict(_ABBREVIATIONS)

    def normalize(self, text: str) -> str:
        """Return a lower-case, punctuation-free, single-spaced form of ``text``."""
        result = text.lower()
        result = self._expand_abbreviations(result)
        result = self._expand_numbers(result)
        result = _PUNCT_RE.sub(" ", result)
        return _WHITESPACE_RE.sub(" ", result.strip())

    def tokenize(self, text: str) -> list[str]:
        """Split on whitespace and trim non-alphabetic characters off each word."""
        trimmed = (_trim_non_alpha(word) for word in text.split())
        return [word for word in trimmed if word]

    def _expand_abbreviations(self, text: str) -> str:
        for abbrev, expansion in self.abbreviations.items():
            text = text.replace(abbrev, expansion)
        return text

    def _expand_numbers(self, text: str) -> str:
        return _NUMBER_RE.sub(
            lambda m: self.number_words.get(m.group(0), m.group(0)), text
        )