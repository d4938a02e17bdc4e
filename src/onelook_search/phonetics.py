"""ARPABET helpers for the ``pron:`` tags returned with ``md=r``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

ARPABET_VOWELS = {
    "AA",
    "AE",
    "AH",
    "AO",
    "AW",
    "AY",
    "EH",
    "ER",
    "EY",
    "IH",
    "IY",
    "OW",
    "OY",
    "UH",
    "UW",
}

PRONUNCIATION_PREFIX = "pron:"


@dataclass(frozen=True)
class Pronunciation:
    """A word's phonemes as reported by the service."""

    phonemes: Sequence[str]

    @property
    def text(self) -> str:
        return " ".join(self.phonemes)

    @property
    def syllable_count(self) -> int:
        return sum(1 for p in self.phonemes if is_vowel(p))

    @property
    def stress_pattern(self) -> str:
        """Return stress digits for vowels in order."""

        stresses: List[str] = []
        for phoneme in self.phonemes:
            if is_vowel(phoneme):
                stress = phoneme[-1]
                stresses.append(stress if stress.isdigit() else "0")
        return "".join(stresses)


def tokens(pronunciation: str) -> List[str]:
    """Split an ARPABET string into phonemes."""

    return [part for part in pronunciation.strip().split() if part]


def is_vowel(phoneme: str) -> bool:
    return phoneme.rstrip("0123456789").upper() in ARPABET_VOWELS


def parse_pronunciation_tag(tag: str) -> Optional[Pronunciation]:
    """Return the pronunciation carried by a ``pron:`` tag, if any."""

    if not tag.startswith(PRONUNCIATION_PREFIX):
        return None
    phonemes = tokens(tag[len(PRONUNCIATION_PREFIX):])
    if not phonemes:
        return None
    return Pronunciation(tuple(phonemes))
