"""Pronunciation dictionary in the CMU format."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from .phoneme import Phoneme

logger = logging.getLogger(__name__)

_VALID_PHONEMES = frozenset(
    {
        "AA", "AE", "AH", "AO", "AW", "AY", "EH", "ER", "EY",
        "IH", "IY", "OW", "OY", "UH", "UW",
        "B", "CH", "D", "DH", "F", "G", "HH", "JH", "K", "L",
        "M", "N", "NG", "P", "R", "S", "SH", "T", "TH", "V",
        "W", "Y", "Z", "ZH",
        "Q", "X",
    }
)

_SEPARATORS = ("  ", "\t")
_WORD_EXTRA_CHARS = frozenset("()'-0123456789")
_ASCII_WHITESPACE = frozenset(" \t\n\x0c\r")
_MAX_REPORTED_SKIPS = 10
_PROGRESS_INTERVAL = 10_000


class DictionaryError(Exception):
    """Raised when a dictionary cannot be loaded or an entry cannot be parsed."""


def _is_ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ascii_alnum(ch: str) -> bool:
    return _is_ascii_alpha(ch) or _is_ascii_digit(ch)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _truncate(text: str, max_len: int = 50) -> str:
    return text if len(text) <= max_len else f"{text[:max_len]}..."


def _is_valid_line(line: str) -> bool:
    if _byte_len(line.strip()) < 3 or _byte_len(line) > 200:
        return False
    if any(not ch.isascii() and not ch.isspace() for ch in line):
        return False
    return any(_is_ascii_alpha(ch) for ch in line)


def _is_valid_word_part(word: str) -> bool:
    if not word or len(word) > 50:
        return False
    return all(_is_ascii_alpha(ch) or ch in _WORD_EXTRA_CHARS for ch in word)


def _is_valid_phonemes_part(phonemes: str) -> bool:
    if not phonemes or len(phonemes) > 100:
        return False
    if not all(_is_ascii_alnum(ch) or ch in _ASCII_WHITESPACE for ch in phonemes):
        return False
    return any(_is_ascii_alpha(ch) for ch in phonemes)


def _parse_cmu_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    for separator in _SEPARATORS:
        pos = line.find(separator)
        if pos < 0:
            continue
        word_part = line[:pos].strip()
        phonemes_part = line[pos:].strip()
        if (
            word_part
            and phonemes_part
            and _is_valid_word_part(word_part)
            and _is_valid_phonemes_part(phonemes_part)
        ):
            return word_part, phonemes_part
    return None


def _clean_word(word: str) -> str:
    base = word.split("(", 1)[0]
    return "".join(ch for ch in base.lower() if _is_ascii_alpha(ch) or ch == "'")


def _is_valid_arpabet(phoneme: str) -> bool:
    if not phoneme or len(phoneme) > 4:
        return False
    if not all(_is_ascii_alnum(ch) for ch in phoneme):
        return False
    if _is_ascii_digit(phoneme[-1]):
        if len(phoneme) == 1:
            return False
        phoneme = phoneme[:-1]
    return phoneme.upper() in _VALID_PHONEMES


def _try_fix_phoneme(token: str) -> str | None:
    cleaned = "".join(ch for ch in token if _is_ascii_alnum(ch))
    return cleaned if _is_valid_arpabet(cleaned) else None


def _parse_phonemes(phonemes_str: str) -> list[Phoneme]:
    tokens = phonemes_str.split()
    if not tokens:
        raise DictionaryError("No phonemes found")

    phonemes: list[Phoneme] = []
    for token in tokens:
        if len(token) > 4:
            continue
        if _is_valid_arpabet(token):
            phonemes.append(Phoneme.from_arpabet(token))
            continue
        fixed = _try_fix_phoneme(token)
        if fixed is not None:
            phonemes.append(Phoneme.from_arpabet(fixed))
        else:
            logger.warning("Skipping invalid phoneme: %r", token)

    if not phonemes:
        raise DictionaryError("No valid phonemes after parsing")
    return phonemes


def _iter_lines(content: str) -> Iterable[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


class Dictionary:
    """Maps lower-case words to their phoneme sequences."""

    def __init__(self, entries: dict[str, list[Phoneme]] | None = None) -> None:
        self._entries: dict[str, list[Phoneme]] = {}
        for word, phonemes in (entries or {}).items():
            self.add_entry(word, phonemes)

    @classmethod
    def load_cmu_dict(cls, path: str | os.PathLike[str]) -> Dictionary:
        """Load a dictionary file, skipping comments and malformed lines."""
        logger.info("Loading CMU dictionary from: %s", path)
        if not os.path.exists(path):
            raise DictionaryError(f"CMU dictionary file not found: {path}")
        try:
            with open(path, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise DictionaryError(
                f"Failed to read CMU dictionary file: {path}"
            ) from exc

        content = raw.decode("utf-8", errors="replace")
        entries: dict[str, list[Phoneme]] = {}
        line_count = valid_entries = skipped_lines = 0

        for line_count, line in enumerate(_iter_lines(content), start=1):
            if line.startswith(";;;") or not line.strip():
                continue

            if not _is_valid_line(line):
                skipped_lines += 1
                if skipped_lines <= _MAX_REPORTED_SKIPS:
                    logger.warning(
                        "Skipping invalid line %d: %r", line_count, _truncate(line)
                    )
                continue

            parsed = _parse_cmu_line(line)
            if parsed is None:
                skipped_lines += 1
                if skipped_lines <= _MAX_REPORTED_SKIPS:
                    logger.warning(
                        "Skipping malformed line %d: %r", line_count, _truncate(line)
                    )
            else:
                word, phonemes_str = parsed
                try:
                    phonemes = _parse_phonemes(phonemes_str)
                except DictionaryError as exc:
                    logger.warning(
                        "Failed to parse phonemes for %r on line %d: %s",
                        word,
                        line_count,
                        exc,
                    )
                else:
                    entries[_clean_word(word)] = phonemes
                    valid_entries += 1

            if line_count % _PROGRESS_INTERVAL == 0:
                logger.info(
                    "Processed %d lines, %d valid entries, %d skipped",
                    line_count,
                    valid_entries,
                    skipped_lines,
                )

        logger.info(
            "Loaded CMU dictionary: %d lines, %d valid entries, %d skipped",
            line_count,
            valid_entries,
            skipped_lines,
        )

        if valid_entries == 0:
            raise DictionaryError("No valid entries found in CMU dictionary")

        dictionary = cls()
        dictionary._entries = entries
        return dictionary

    def lookup(self, word: str) -> list[Phoneme] | None:
        """Return the pronunciation of ``word``, or None if it is unknown."""
        phonemes = self._entries.get(word.lower())
        return list(phonemes) if phonemes is not None else None

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add_entry(self, word: str, phonemes: Iterable[Phoneme]) -> None:
        """Add or replace the pronunciation of ``word``."""
        self._entries[word.lower()] = list(phonemes)

    def is_empty(self) -> bool:
        return not self._entries

    def get_sample_words(self, count: int) -> list[str]:
        """Return the first ``count`` words in sorted order."""
        return sorted(self._entries)[:count]