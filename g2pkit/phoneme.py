"""Phoneme representation based on ARPAbet symbols."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StressLevel(Enum):
    """Lexical stress carried by a phoneme."""

    UNSTRESSED = 0
    PRIMARY = 1
    SECONDARY = 2


class PhonemeType(Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    SPECIAL = "special"


class Manner(Enum):
    STOP = "stop"
    FRICATIVE = "fricative"
    AFFRICATE = "affricate"
    NASAL = "nasal"
    LIQUID = "liquid"
    GLIDE = "glide"


class Place(Enum):
    BILABIAL = "bilabial"
    LABIODENTAL = "labiodental"
    DENTAL = "dental"
    ALVEOLAR = "alveolar"
    POSTALVEOLAR = "postalveolar"
    PALATAL = "palatal"
    VELAR = "velar"
    GLOTTAL = "glottal"


class Voicing(Enum):
    VOICED = "voiced"
    VOICELESS = "voiceless"


class Height(Enum):
    HIGH = "high"
    MID = "mid"
    LOW = "low"


class Backness(Enum):
    FRONT = "front"
    CENTRAL = "central"
    BACK = "back"


@dataclass(frozen=True)
class PhonemeFeatures:
    """Articulatory features of a phoneme."""

    phoneme_type: PhonemeType
    manner: Manner | None = None
    place: Place | None = None
    voicing: Voicing | None = None
    height: Height | None = None
    backness: Backness | None = None

    @classmethod
    def vowel(cls, height: Height, backness: Backness) -> PhonemeFeatures:
        return cls(PhonemeType.VOWEL, height=height, backness=backness)

    @classmethod
    def consonant(cls, manner: Manner, place: Place, voicing: Voicing) -> PhonemeFeatures:
        return cls(PhonemeType.CONSONANT, manner=manner, place=place, voicing=voicing)

    @classmethod
    def special(cls) -> PhonemeFeatures:
        return cls(PhonemeType.SPECIAL)


_V = PhonemeFeatures.vowel
_C = PhonemeFeatures.consonant

_ARPABET_FEATURES: dict[str, PhonemeFeatures] = {
    "AA": _V(Height.LOW, Backness.BACK),
    "AE": _V(Height.LOW, Backness.FRONT),
    "AH": _V(Height.MID, Backness.CENTRAL),
    "AO": _V(Height.MID, Backness.BACK),
    "AW": _V(Height.LOW, Backness.CENTRAL),
    "AY": _V(Height.LOW, Backness.CENTRAL),
    "EH": _V(Height.MID, Backness.FRONT),
    "ER": _V(Height.MID, Backness.CENTRAL),
    "EY": _V(Height.MID, Backness.FRONT),
    "IH": _V(Height.HIGH, Backness.FRONT),
    "IY": _V(Height.HIGH, Backness.FRONT),
    "OW": _V(Height.MID, Backness.BACK),
    "OY": _V(Height.MID, Backness.BACK),
    "UH": _V(Height.HIGH, Backness.BACK),
    "UW": _V(Height.HIGH, Backness.BACK),
    "B": _C(Manner.STOP, Place.BILABIAL, Voicing.VOICED),
    "CH": _C(Manner.AFFRICATE, Place.POSTALVEOLAR, Voicing.VOICELESS),
    "D": _C(Manner.STOP, Place.ALVEOLAR, Voicing.VOICED),
    "DH": _C(Manner.FRICATIVE, Place.DENTAL, Voicing.VOICED),
    "F": _C(Manner.FRICATIVE, Place.LABIODENTAL, Voicing.VOICELESS),
    "G": _C(Manner.STOP, Place.VELAR, Voicing.VOICED),
    "HH": _C(Manner.FRICATIVE, Place.GLOTTAL, Voicing.VOICELESS),
    "JH": _C(Manner.AFFRICATE, Place.POSTALVEOLAR, Voicing.VOICED),
    "K": _C(Manner.STOP, Place.VELAR, Voicing.VOICELESS),
    "L": _C(Manner.LIQUID, Place.ALVEOLAR, Voicing.VOICED),
    "M": _C(Manner.NASAL, Place.BILABIAL, Voicing.VOICED),
    "N": _C(Manner.NASAL, Place.ALVEOLAR, Voicing.VOICED),
    "NG": _C(Manner.NASAL, Place.VELAR, Voicing.VOICED),
    "P": _C(Manner.STOP, Place.BILABIAL, Voicing.VOICELESS),
    "R": _C(Manner.LIQUID, Place.ALVEOLAR, Voicing.VOICED),
    "S": _C(Manner.FRICATIVE, Place.ALVEOLAR, Voicing.VOICELESS),
    "SH": _C(Manner.FRICATIVE, Place.POSTALVEOLAR, Voicing.VOICELESS),
    "T": _C(Manner.STOP, Place.ALVEOLAR, Voicing.VOICELESS),
    "TH": _C(Manner.FRICATIVE, Place.DENTAL, Voicing.VOICELESS),
    "V": _C(Manner.FRICATIVE, Place.LABIODENTAL, Voicing.VOICED),
    "W": _C(Manner.GLIDE, Place.BILABIAL, Voicing.VOICED),
    "Y": _C(Manner.GLIDE, Place.PALATAL, Voicing.VOICED),
    "Z": _C(Manner.FRICATIVE, Place.ALVEOLAR, Voicing.VOICED),
    "ZH": _C(Manner.FRICATIVE, Place.POSTALVEOLAR, Voicing.VOICED),
}

_STRESS_MARKS = {
    "0": StressLevel.UNSTRESSED,
    "1": StressLevel.PRIMARY,
    "2": StressLevel.SECONDARY,
}

_BOUNDARY = " "


@dataclass(frozen=True)
class Phoneme:
    """A single phoneme with its stress and articulatory features."""

    symbol: str
    stress: StressLevel
    features: PhonemeFeatures

    @classmethod
    def from_arpabet(cls, symbol: str) -> Phoneme:
        """Build a phoneme from an ARPAbet symbol with an optional stress digit."""
        stress = _STRESS_MARKS.get(symbol[-1:]) if symbol else None
        if stress is None:
            base, stress = symbol, StressLevel.UNSTRESSED
        else:
            base = symbol[:-1]
        features = _ARPABET_FEATURES.get(base, PhonemeFeatures.special())
        return cls(base, stress, features)

    @classmethod
    def word_boundary(cls) -> Phoneme:
        """A marker placed between words."""
        return cls(_BOUNDARY, StressLevel.UNSTRESSED, PhonemeFeatures.special())

    def is_vowel(self) -> bool:
        return self.features.phoneme_type is PhonemeType.VOWEL

    def is_consonant(self) -> bool:
        return self.features.phoneme_type is PhonemeType.CONSONANT

    def __str__(self) -> str:
        if self.symbol == _BOUNDARY:
            return _BOUNDARY
        return f"{self.symbol}{self.stress.value}"