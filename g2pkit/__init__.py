"""English grapheme-to-phoneme conversion with a pronouncing dictionary and letter-to-sound rules."""

__version__ = "0.1.0"