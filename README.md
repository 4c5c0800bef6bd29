# g2pkit

English grapheme-to-phoneme (G2P) conversion. Words are looked up in a
CMU-style pronouncing dictionary first. Words that are not found there go
through a letter-to-sound rules engine. Phonemes are ARPAbet symbols, and each
one carries a stress level and articulatory features.

The package uses only the standard library at run time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Data files

The package does not include a pronouncing dictionary or a rules file. You
supply both. By default, `G2P.load()` and the `g2pkit` command read
`data/cmudict.txt` and `data/en_rules.txt`, relative to the current directory.

### Pronouncing dictionary

The dictionary uses CMU format. Each entry is one line: the word, two spaces
or a tab, then the ARPAbet phonemes separated by spaces.

```
;;; comment
HELLO  HH AH0 L OW1
HELLO(1)  HH EH0 L OW1
WORLD  W ER1 L D
```

- Lines that start with `;;;` are comments. Blank lines are ignored.
- Variant markers such as `(1)` are removed. The variant is stored under the base word and replaces any earlier entry for that word.
- Words are stored in lower case.
- Lines that are malformed, non-ASCII or too long are skipped. Tokens that are not ARPAbet symbols are also skipped.
- A warning about each skipped line goes to the `g2pkit.dictionary` logger. Only the first ten skipped lines are reported.

### Rules file

The rules file holds one rule per line:

```
pattern|left_context|right_context|phonemes|priority|conditions
```

The fields work as follows:

- **left_context** may be `START`, which matches only at the start of the word.
- **right_context** may be `END`, which matches only at the end of the word.
- **phonemes** may be `SILENT`, which means the rule produces no phonemes.
- **priority** defaults to the length of the pattern.
- **conditions** is a comma-separated list. It may include:
  - `word_start` or `START`
  - `word_end` or `END`
  - `before_vowel` or `VOWEL_BEFORE`
  - `after_vowel` or `VOWEL_AFTER`
  - `stressed`
  - `unstressed`

  `stressed` and `unstressed` are accepted but do not restrict where a rule applies. Unknown names are ignored.

Other lines in the file:

- A whole-word exception is written as `IRREGULAR|word|PH1 PH2 ...`.
- Lines that start with `#` or `=` are ignored.
- Lines with fewer than four fields are ignored.

```
# digraphs
ph|||F
ck|||K
e||END|SILENT
IRREGULAR|colonel|K ER1 N AH0 L
```

### How words are converted

1. If the word is an irregular word, its listed phonemes are returned.
2. Otherwise the word is scanned from left to right. At each position, the matching rule with the highest priority is applied. Only rules with a priority above zero are applied.
3. If no rule matches a letter, that letter gets a default phoneme. For example, `a` becomes `AE0` and `c` becomes `K`.
4. Characters that are not letters and have no matching rule produce nothing.

## Usage

```python
from g2pkit.g2p import G2P

g2p = G2P.load("data/cmudict.txt", "data/en_rules.txt")

print(" ".join(str(p) for p in g2p.word_to_phonemes("hello")))
# HH0 AH0 L0 OW1

for phoneme in g2p.text_to_phonemes("Dr. Smith has 5 cats."):
    print("|" if phoneme.symbol == " " else phoneme, end=" ")

stats = g2p.get_stats()
print(stats.dict_entries, stats.rule_count)
```

`text_to_phonemes` prepares the text before converting it:

- It lower-cases the text.
- It expands common abbreviations such as `dr.`, `mr.`, `mrs.`, `st.` and `etc.` This is plain substring replacement, so text that merely contains one of these abbreviations is also changed.
- It spells out the whole numbers 0 to 20. Other numbers are left as digits, and the tokenizer then drops them.
- It replaces punctuation with spaces.
- It adds a word-boundary phoneme (symbol `" "`) after every word, including the last.

`word_to_phonemes` lower-cases a single word and looks it up in the dictionary. If the word is not there, it uses the rules.

You can also build a `G2P` from objects you already have:
`G2P(dictionary, rules_engine, text_processor=None)`.

The pieces can also be used on their own:

```python
from g2pkit.dictionary import Dictionary
from g2pkit.lang import English
from g2pkit.phoneme import Phoneme
from g2pkit.rules import RulesEngine
from g2pkit.text import TextProcessor

dictionary = Dictionary.load_cmu_dict("data/cmudict.txt")
dictionary.add_entry("g2pkit", [Phoneme.from_arpabet(s) for s in "JH IY1 T UW1 P IY1".split()])
print(dictionary.lookup("Hello"), len(dictionary), dictionary.get_sample_words(5))

engine = RulesEngine.from_text("ph|||F\nIRREGULAR|yacht|Y AA1 T\n")
print([str(p) for p in engine.apply_rules("phone")])

processor = TextProcessor()
print(processor.tokenize(processor.normalize("Mr. Jones lives on 3 St.")))

english = English()
print(english.tokenize(english.normalize_text("Hello, world!")))
print(english.get_stress_pattern("language"))  # [0]
```

The modules do the following:

- **`g2pkit.dictionary`**
  - `Dictionary.load_cmu_dict` raises `DictionaryError` when the file is missing, cannot be read, or holds no usable entries.
  - `lookup` returns a list of phonemes, or `None` for an unknown word.
  - `add_entry` adds or replaces a word.
  - `size()`, `len()`, `is_empty()` and `get_sample_words(count)` describe the contents. `get_sample_words` returns the first words in sorted order.
- **`g2pkit.rules`**
  - `RulesEngine.load_english_rules(path)` reads a rules file. A missing file raises `OSError`.
  - `RulesEngine.from_text` parses the same format from a string.
  - `rule_count()` returns the number of rules.
  - `Rule` and `RuleCondition` describe a single rule.
- **`g2pkit.phoneme`**
  - Each `Phoneme` has a `symbol`, a `stress` (`StressLevel`) and `features` (`PhonemeFeatures`). The features hold the type, manner, place, voicing, vowel height and backness.
  - `Phoneme.from_arpabet` reads a trailing stress digit. Without a digit, the phoneme is unstressed.
  - `Phoneme.word_boundary()` returns the boundary marker.
  - `is_vowel()` and `is_consonant()` classify a phoneme.
  - `str()` gives the symbol followed by its stress digit.
- **`g2pkit.lang`**
  - `Language` is the abstract interface.
  - `English` implements it with `TextProcessor`. Its stress pattern always marks the first syllable.

## Command line

The `g2pkit` command has three subcommands:

```
g2pkit [--dict PATH] [--rules PATH] demo
g2pkit [--dict PATH] [--rules PATH] benchmark [--iterations N]
g2pkit [--dict PATH] verify
```

- **`demo`** is the default. It prints the dictionary and rule counts, then converts a few sample words and sentences. In sentence output, `|` marks word boundaries.
- **`benchmark`** converts a fixed paragraph repeatedly, 1000 times by default, and reports the timing.
- **`verify`** loads the dictionary and prints the following:
  - its file size and entry count
  - the pronunciations of a list of common words
  - the first ten entries in sorted order
  - the average length of those ten words

The command exits with status 1 if the dictionary or rules cannot be loaded.
`verify` with a missing dictionary file prints an error and exits with 0.

## Limitations

- There is no built-in pronouncing dictionary or rule set. You must provide the data files.
- Stress comes only from the dictionary or from the digits written in rules. No stress is assigned by rule.
- Numbers above twenty are not spelled out.