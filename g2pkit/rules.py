"""Letter-to-sound rules used for words missing from the dictionary."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .phoneme import Phoneme


class RuleCondition(Enum):
    """Extra constraint a rule places on where it may apply."""

    WORD_START = "word_start"
    WORD_END = "word_end"
    BEFORE_VOWEL = "before_vowel"
    AFTER_VOWEL = "after_vowel"
    STRESSED = "stressed"
    UNSTRESSED = "unstressed"


_CONDITION_NAMES: dict[str, RuleCondition] = {
    "START": RuleCondition.WORD_START,
    "END": RuleCondition.WORD_END,
    "VOWEL_BEFORE": RuleCondition.BEFORE_VOWEL,
    "VOWEL_AFTER": RuleCondition.AFTER_VOWEL,
    "word_start": RuleCondition.WORD_START,
    "word_end": RuleCondition.WORD_END,
    "before_vowel": RuleCondition.BEFORE_VOWEL,
    "after_vowel": RuleCondition.AFTER_VOWEL,
    "stressed": RuleCondition.STRESSED,
    "unstressed": RuleCondition.UNSTRESSED,
}

_DEFAULT_PHONEMES: dict[str, str] = {
    "a": "AE0",
    "b": "B",
    "c": "K",
    "d": "D",
    "e": "EH0",
    "f": "F",
    "g": "G",
    "h": "HH",
    "i": "IH0",
    "j": "JH",
    "k": "K",
    "l": "L",
    "m": "M",
    "n": "N",
    "o": "OW0",
    "p": "P",
    "q": "K",
    "r": "R",
    "s": "S",
    "t": "T",
    "u": "UH0",
    "v": "V",
    "w": "W",
    "x": "K",
    "y": "Y",
    "z": "Z",
}

_VOWEL_LETTERS = frozenset("aeiouy")
_IRREGULAR_PREFIX = "IRREGULAR|"
_SILENT = "SILENT"
_PRIORITY_RE = re.compile(r"\+?[0-9]+")


def _ascii_lower(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def _is_vowel(ch: str) -> bool:
    return _ascii_lower(ch) in _VOWEL_LETTERS


def _matches_at(text: str, word: str, start: int) -> bool:
    return all(_ascii_lower(word[start + i]) == ch for i, ch in enumerate(text))


@dataclass(frozen=True)
class Rule:
    """Maps a letter pattern, in context, to a sequence of ARPAbet phonemes."""

    pattern: str
    left_context: str | None = None
    right_context: str | None = None
    phonemes: tuple[str, ...] = ()
    priority: int = 0
    conditions: tuple[RuleCondition, ...] = field(default_factory=tuple)

    def match_priority(self, word: str, pos: int) -> int | None:
        """Return the rule's priority if it applies at ``pos`` in ``word``."""
        end = pos + len(self.pattern)
        if end > len(word) or not _matches_at(self.pattern, word, pos):
            return None
        if self.right_context is not None and not self._right_ok(word, end):
            return None
        if self.left_context is not None and not self._left_ok(word, pos):
            return None
        if not all(self._condition_ok(c, word, pos) for c in self.conditions):
            return None
        return self.priority

    def _right_ok(self, word: str, pos: int) -> bool:
        context = self.right_context or ""
        if context == "END":
            return pos >= len(word)
        if pos + len(context) > len(word):
            return False
        return _matches_at(context, word, pos)

    def _left_ok(self, word: str, pos: int) -> bool:
        context = self.left_context or ""
        if context == "START":
            return pos == 0
        if len(context) > pos:
            return False
        return _matches_at(context, word, pos - len(context))

    @staticmethod
    def _condition_ok(condition: RuleCondition, word: str, pos: int) -> bool:
        if condition is RuleCondition.WORD_START:
            return pos == 0
        if condition is RuleCondition.WORD_END:
            return pos == len(word) - 1
        if condition is RuleCondition.BEFORE_VOWEL:
            return pos + 1 < len(word) and _is_vowel(word[pos + 1])
        if condition is RuleCondition.AFTER_VOWEL:
            return pos > 0 and _is_vowel(word[pos - 1])
        return True


def _parse_conditions(text: str) -> tuple[RuleCondition, ...]:
    names = (name.strip() for name in text.split(","))
    return tuple(_CONDITION_NAMES[name] for name in names if name in _CONDITION_NAMES)


def _parse_priority(text: str, pattern: str) -> int:
    fallback = len(pattern.encode("utf-8"))
    if text and _PRIORITY_RE.fullmatch(text):
        return int(text)
    return fallback


def _parse_rule(line: str) -> Rule | None:
    parts = line.split("|")
    if len(parts) < 4:
        return None
    pattern = parts[0]
    phonemes = () if parts[3] == _SILENT else tuple(parts[3].split())
    priority = _parse_priority(parts[4] if len(parts) > 4 else "", pattern)
    conditions = _parse_conditions(parts[5]) if len(parts) > 5 and parts[5] else ()
    return Rule(
        pattern=pattern,
        left_context=parts[1] or None,
        right_context=parts[2] or None,
        phonemes=phonemes,
        priority=priority,
        conditions=conditions,
    )


def _parse_irregular(line: str) -> tuple[str, list[str]] | None:
    parts = line.split("|")
    if len(parts) < 3:
        return None
    word = parts[1].strip().lower()
    phonemes = parts[2].split()
    if not word or not phonemes:
        return None
    return word, phonemes


class RulesEngine:
    """Applies letter-to-sound rules, longest or highest priority first."""

    def __init__(
        self,
        rules: Iterable[Rule] = (),
        irregular_words: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self.rules: list[Rule] = sorted(rules, key=lambda rule: -rule.priority)
        self.irregular_words: dict[str, list[str]] = {
            word.lower(): list(phonemes)
            for word, phonemes in (irregular_words or {}).items()
        }
        self._groups: dict[str, list[Rule]] = {}
        for rule in self.rules:
            if rule.pattern:
                self._groups.setdefault(rule.pattern[0], []).append(rule)

    @classmethod
    def load_english_rules(cls, rules_path: str | os.PathLike[str]) -> RulesEngine:
        """Load rules and irregular words from a rules file."""
        return cls.from_text(Path(rules_path).read_text(encoding="utf-8"))

    @classmethod
    def from_text(cls, content: str) -> RulesEngine:
        """Parse rules written as ``pattern|left|right|phonemes|priority|conditions``."""
        rules: list[Rule] = []
        irregular: dict[str, list[str]] = {}
        for raw_line in content.splitlines():
            line = raw_line.strip()
            if not line or line.startswith(("#", "=")):
                continue
            if line.startswith(_IRREGULAR_PREFIX):
                entry = _parse_irregular(line)
                if entry is not None:
                    irregular[entry[0]] = entry[1]
                continue
            rule = _parse_rule(line)
            if rule is not None:
                rules.append(rule)
        return cls(rules, irregular)

    def apply_rules(self, word: str) -> list[Phoneme]:
        """Convert ``word`` to phonemes using irregular forms, rules and defaults."""
        irregular = self.irregular_words.get(word.lower())
        if irregular is not None:
            return [Phoneme.from_arpabet(symbol) for symbol in irregular]

        phonemes: list[Phoneme] = []
        pos = 0
        while pos < len(word):
            rule = self._best_rule(word, pos)
            if rule is not None:
                phonemes.extend(Phoneme.from_arpabet(s) for s in rule.phonemes if s)
                pos += len(rule.pattern)
                continue
            default = _DEFAULT_PHONEMES.get(_ascii_lower(word[pos]))
            if default is not None:
                phonemes.append(Phoneme.from_arpabet(default))
            pos += 1
        return phonemes

    def _best_rule(self, word: str, pos: int) -> Rule | None:
        best: Rule | None = None
        best_priority = 0
        for rule in self._groups.get(word[pos], ()):
            priority = rule.match_priority(word, pos)
            if priority is not None and priority > best_priority:
                best, best_priority = rule, priority
        return best

    def rule_count(self) -> int:
        return len(self.rules)