import pytest

from g2pkit.dictionary import Dictionary, DictionaryError
from g2pkit.g2p import G2P, G2PStats
from g2pkit.phoneme import Phoneme, StressLevel
from g2pkit.rules import RulesEngine

DICT_TEXT = """;;; test dictionary
HELLO  HH AH0 L OW1
WORLD  W ER1 L D
SMITH  S M IH1 TH
"""

RULES_TEXT = """# rules
ph|||F||
IRREGULAR|colonel|K ER1 N AH0 L
"""


@pytest.fixture
def paths(tmp_path):
    dict_path = tmp_path / "cmudict.txt"
    rules_path = tmp_path / "en_rules.txt"
    dict_path.write_text(DICT_TEXT, encoding="utf-8")
    rules_path.write_text(RULES_TEXT, encoding="utf-8")
    return dict_path, rules_path


@pytest.fixture
def g2p(paths):
    return G2P.load(*paths)


def symbols(phonemes):
    return [p.symbol for p in phonemes]


def test_basic_word_conversion(g2p):
    hello = g2p.word_to_phonemes("hello")
    assert hello
    assert symbols(hello) == ["HH", "AH", "L", "OW"]
    assert hello[-1].stress is StressLevel.PRIMARY
    assert g2p.word_to_phonemes("world")


def test_word_lookup_ignores_case(g2p):
    assert g2p.word_to_phonemes("HeLLo") == g2p.word_to_phonemes("hello")


def test_text_processing(g2p):
    phonemes = g2p.text_to_phonemes("Hello, world!")
    assert symbols(phonemes) == ["HH", "AH", "L", "OW", " ", "W", "ER", "L", "D", " "]


def test_number_expansion(g2p):
    phonemes = g2p.text_to_phonemes("I have 5 cats")
    assert phonemes
    boundaries = [p for p in phonemes if p == Phoneme.word_boundary()]
    assert len(boundaries) == 4
    assert phonemes[-1] == Phoneme.word_boundary()


def test_abbreviations(g2p):
    phonemes = g2p.text_to_phonemes("Dr. Smith")
    assert phonemes
    text = symbols(phonemes)
    assert text.count(" ") == 2
    assert text[-5:] == ["S", "M", "IH", "TH", " "]


def test_rules_engine_for_unknown_word(g2p):
    phonemes = g2p.word_to_phonemes("pseudoword")
    assert phonemes
    assert all(p.symbol != " " for p in phonemes)


def test_rules_pattern_used(g2p):
    assert symbols(g2p.word_to_phonemes("phone"))[0] == "F"


def test_irregular_word(g2p):
    assert symbols(g2p.word_to_phonemes("colonel")) == ["K", "ER", "N", "AH", "L"]


def test_empty_text_gives_nothing(g2p):
    assert g2p.text_to_phonemes("  ...  ") == []


def test_stats(g2p):
    assert g2p.get_stats() == G2PStats(dict_entries=3, rule_count=1)


def test_dictionary_takes_precedence_over_rules():
    dictionary = Dictionary()
    dictionary.add_entry("Phone", [Phoneme.from_arpabet("P"), Phoneme.from_arpabet("OW1")])
    engine = RulesEngine.from_text("ph|||F||\n")
    converter = G2P(dictionary, engine)
    assert symbols(converter.word_to_phonemes("phone")) == ["P", "OW"]


def test_missing_dictionary_raises(tmp_path, paths):
    _, rules_path = paths
    with pytest.raises(DictionaryError):
        G2P.load(tmp_path / "absent.txt", rules_path)


def test_missing_rules_raises(tmp_path, paths):
    dict_path, _ = paths
    with pytest.raises(OSError):
        G2P.load(dict_path, tmp_path / "absent_rules.txt")