from itertools import product
from string import ascii_uppercase

import pytest

from g2pkit.dictionary import Dictionary, DictionaryError
from g2pkit.phoneme import Phoneme, StressLevel

SAMPLE = """\
;;; A small sample of the CMU pronouncing dictionary
;;; comment lines are ignored

HELLO  HH AH0 L OW1
WORLD  W ER1 L D
THE  DH AH0
AND  AH0 N D
COMPUTER  K AH0 M P Y UW1 T ER0
CAT\tK AE1 T
DON'T  D OW1 N T
"""


def _write(tmp_path, content, name="dict.txt"):
    path = tmp_path / name
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def sample_dict(tmp_path):
    return Dictionary.load_cmu_dict(_write(tmp_path, SAMPLE))


def _symbols(phonemes):
    return [p.symbol for p in phonemes]


def test_cmu_dict_loading_large(tmp_path):
    lines = [
        f"{''.join(letters)}  K AE1 T"
        for letters in product(ascii_uppercase, repeat=3)
    ]
    path = _write(tmp_path, "\n".join(lines) + "\n")
    dictionary = Dictionary.load_cmu_dict(path)
    assert not dictionary.is_empty()
    assert dictionary.size() > 10000
    assert dictionary.size() == 26 ** 3


@pytest.mark.parametrize("word", ["hello", "world", "the", "and", "computer"])
def test_common_words(sample_dict, word):
    phonemes = sample_dict.lookup(word)
    assert phonemes is not None
    assert len(phonemes) > 0


def test_phoneme_parsing(sample_dict):
    phonemes = sample_dict.lookup("hello")
    assert len(phonemes) >= 3
    assert phonemes[0].symbol == "HH"
    assert _symbols(phonemes) == ["HH", "AH", "L", "OW"]
    assert phonemes[1].stress is StressLevel.UNSTRESSED
    assert phonemes[3].stress is StressLevel.PRIMARY


def test_comments_and_blank_lines_are_not_entries(sample_dict):
    assert sample_dict.size() == 7
    assert len(sample_dict) == 7


def test_tab_separator(sample_dict):
    assert _symbols(sample_dict.lookup("cat")) == ["K", "AE", "T"]


def test_apostrophe_kept_in_word(sample_dict):
    assert _symbols(sample_dict.lookup("don't")) == ["D", "OW", "N", "T"]


def test_lookup_is_case_insensitive(sample_dict):
    assert sample_dict.lookup("HELLO") == sample_dict.lookup("hello")


def test_unknown_word_returns_none(sample_dict):
    assert sample_dict.lookup("zzyzx") is None


def test_variant_replaces_earlier_entry(tmp_path):
    path = _write(tmp_path, "HELLO  HH AH0 L OW1\nHELLO(1)  HH EH0 L OW1\n")
    dictionary = Dictionary.load_cmu_dict(path)
    assert dictionary.size() == 1
    assert _symbols(dictionary.lookup("hello")) == ["HH", "EH", "L", "OW"]


def test_invalid_phoneme_tokens_are_skipped(tmp_path):
    path = _write(tmp_path, "ABC  AE1 QQ B\nWORD  W ER1 DXXXX\n")
    dictionary = Dictionary.load_cmu_dict(path)
    assert _symbols(dictionary.lookup("abc")) == ["AE", "B"]
    assert _symbols(dictionary.lookup("word")) == ["W", "ER"]


def test_entry_with_no_valid_phonemes_is_dropped(tmp_path):
    path = _write(tmp_path, "GOOD  G UH1 D\nBAD  QQ ZZ\n")
    dictionary = Dictionary.load_cmu_dict(path)
    assert dictionary.lookup("bad") is None
    assert dictionary.size() == 1


def test_malformed_lines_are_skipped(tmp_path):
    content = "A.B  EY1 B IY1\nNOSEPARATOR AH0\nCAT  K AE1 T\n"
    dictionary = Dictionary.load_cmu_dict(_write(tmp_path, content))
    assert dictionary.get_sample_words(10) == ["cat"]


def test_non_ascii_lines_are_skipped(tmp_path):
    content = "CAF\xc9  K AE1 F EY1\nCAT  K AE1 T\n".encode("latin-1")
    dictionary = Dictionary.load_cmu_dict(_write(tmp_path, content))
    assert dictionary.get_sample_words(10) == ["cat"]


def test_overlong_line_is_skipped(tmp_path):
    content = "LONG  " + " ".join(["AH0"] * 80) + "\nCAT  K AE1 T\n"
    dictionary = Dictionary.load_cmu_dict(_write(tmp_path, content))
    assert dictionary.lookup("long") is None
    assert dictionary.size() == 1


def test_crlf_line_endings(tmp_path):
    path = _write(tmp_path, b"HELLO  HH AH0 L OW1\r\nCAT  K AE1 T\r\n")
    dictionary = Dictionary.load_cmu_dict(path)
    assert _symbols(dictionary.lookup("hello")) == ["HH", "AH", "L", "OW"]
    assert _symbols(dictionary.lookup("cat")) == ["K", "AE", "T"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(DictionaryError, match="not found"):
        Dictionary.load_cmu_dict(tmp_path / "missing.txt")


def test_file_without_entries_raises(tmp_path):
    path = _write(tmp_path, ";;; only a comment\n\n")
    with pytest.raises(DictionaryError, match="No valid entries"):
        Dictionary.load_cmu_dict(path)


def test_new_dictionary_is_empty():
    dictionary = Dictionary()
    assert dictionary.is_empty()
    assert dictionary.size() == 0


def test_add_entry_lowercases_word():
    dictionary = Dictionary()
    dictionary.add_entry("Rust", [Phoneme.from_arpabet("R"), Phoneme.from_arpabet("AH1")])
    assert not dictionary.is_empty()
    assert _symbols(dictionary.lookup("rust")) == ["R", "AH"]
    assert dictionary.get_sample_words(5) == ["rust"]


def test_get_sample_words_sorted_and_limited(sample_dict):
    assert sample_dict.get_sample_words(3) == ["and", "cat", "computer"]
    assert len(sample_dict.get_sample_words(100)) == 7


def test_lookup_returns_copy(sample_dict):
    phonemes = sample_dict.lookup("cat")
    phonemes.clear()
    assert len(sample_dict.lookup("cat")) == 3