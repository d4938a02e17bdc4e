"""Dataclasses representing decoded results and search outcomes."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .phonetics import Pronunciation, parse_pronunciation_tag

POS_MAP = {
    "n": "noun",
    "v": "verb",
    "adj": "adjective",
    "adv": "adverb",
    "u": "unknown",
}

PROPER_NOUN_TAG = "prop"
FREQUENCY_PREFIX = "f:"


@dataclass(frozen=True)
class Definition:
    part_of_speech: Optional[str]
    definition: str


@dataclass(frozen=True)
class WordResult:
    """One entry of the ``/words`` response array."""

    word: str
    score: Optional[int] = None
    num_syllables: Optional[int] = None
    defs: Optional[Tuple[str, ...]] = None
    tags: Optional[Tuple[str, ...]] = None

    @property
    def parts_of_speech(self) -> List[str]:
        return [POS_MAP[tag] for tag in self.tags or () if tag in POS_MAP]

    @property
    def is_proper_noun(self) -> bool:
        return PROPER_NOUN_TAG in (self.tags or ())

    @property
    def pronunciation(self) -> Optional[Pronunciation]:
        for tag in self.tags or ():
            pronunciation = parse_pronunciation_tag(tag)
            if pronunciation is not None:
                return pronunciation
        return None

    @property
    def frequency(self) -> Optional[float]:
        """Occurrences per million words of text, when ``md=f`` was requested."""

        for tag in self.tags or ():
            if tag.startswith(FREQUENCY_PREFIX):
                try:
                    return float(tag[len(FREQUENCY_PREFIX):])
                except ValueError:
                    return None
        return None

    @property
    def definitions(self) -> List[Definition]:
        """Split each ``defs`` entry of the form ``"<pos>\\t<text>"``."""

        parsed: List[Definition] = []
        for entry in self.defs or ():
            part, sep, text = entry.partition("\t")
            if sep:
                parsed.append(Definition(POS_MAP.get(part, part or None), text))
            else:
                parsed.append(Definition(None, entry))
        return parsed


class DecodeErrorKind(str, Enum):
    CORRUPTED_DATA = "corrupted_data"
    MISSING_KEY = "missing_key"
    MISSING_VALUE = "missing_value"
    TYPE_MISMATCH = "type_mismatch"
    OTHER = "other"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search call; exactly one subclass is delivered."""

    url: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def words(self) -> Optional[List[WordResult]]:
        return None


@dataclass(frozen=True)
class SearchSuccess(SearchOutcome):
    results: Tuple[WordResult, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return True

    @property
    def words(self) -> Optional[List[WordResult]]:
        return list(self.results)


@dataclass(frozen=True)
class TransportFailure(SearchOutcome):
    reason: str = ""


@dataclass(frozen=True)
class HttpStatusFailure(SearchOutcome):
    status_code: int = 0


@dataclass(frozen=True)
class DecodeFailure(SearchOutcome):
    kind: DecodeErrorKind = DecodeErrorKind.OTHER
    detail: str = ""
