import pytest

from g2pkit.lang import English, Language
from g2pkit.text import TextProcessor


def test_language_is_abstract():
    with pytest.raises(TypeError):
        Language()


@pytest.mark.parametrize("text", ["Hello, world!", "Dr. Smith has 5 cats."])
def test_english_normalize_matches_processor(text):
    assert English().normalize_text(text) == TextProcessor().normalize(text)


def test_english_normalize_expands_number():
    assert English().normalize_text("5 cats") == "five cats"


def test_english_tokenize():
    assert English().tokenize("how are you") == ["how", "are", "you"]


@pytest.mark.parametrize("word", ["hello", "intelligence", ""])
def test_english_stress_pattern_is_first_syllable(word):
    assert English().get_stress_pattern(word) == [0]