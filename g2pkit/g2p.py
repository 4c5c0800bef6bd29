"""Grapheme-to-phoneme conversion combining a dictionary with letter-to-sound rules."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .dictionary import Dictionary
from .phoneme import Phoneme
from .rules import RulesEngine
from .text import TextProcessor

DEFAULT_DICT_PATH = "data/cmudict.txt"
DEFAULT_RULES_PATH = "data/en_rules.txt"


@dataclass(frozen=True)
class G2PStats:
    """Sizes of the resources a converter was built from."""

    dict_entries: int
    rule_count: int


class G2P:
    """Converts text to phonemes, consulting the dictionary before the rules."""

    def __init__(
        self,
        dictionary: Dictionary,
        rules_engine: RulesEngine,
        text_processor: TextProcessor | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.rules_engine = rules_engine
        self.text_processor = text_processor or TextProcessor()

    @classmethod
    def load(
        cls,
        dict_path: str | os.PathLike[str] = DEFAULT_DICT_PATH,
        rules_path: str | os.PathLike[str] = DEFAULT_RULES_PATH,
    ) -> G2P:
        """Build a converter from a CMU dictionary file and a rules file."""
        dictionary = Dictionary.load_cmu_dict(dict_path)
        rules_engine = RulesEngine.load_english_rules(rules_path)
        return cls(dictionary, rules_engine)

    def text_to_phonemes(self, text: str) -> list[Phoneme]:
        """Normalise and split ``text``, then convert each word.

        A word boundary follows every word, including the last.
        """
        normalized = self.text_processor.normalize(text)
        phonemes: list[Phoneme] = []
        for word in self.text_processor.tokenize(normalized):
            phonemes.extend(self.word_to_phonemes(word))
            phonemes.append(Phoneme.word_boundary())
        return phonemes

    def word_to_phonemes(self, word: str) -> list[Phoneme]:
        """Convert one word, falling back to the rules when it is not in the dictionary."""
        word = word.lower()
        phonemes = self.dictionary.lookup(word)
        if phonemes is not None:
            return phonemes
        return self.rules_engine.apply_rules(word)

    def get_stats(self) -> G2PStats:
        return G2PStats(
            dict_entries=self.dictionary.size(),
            rule_count=self.rules_engine.rule_count(),
        )