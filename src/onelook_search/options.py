"""Wire-level vocabulary understood by the Datamuse ``/words`` endpoint."""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class OptionKey(str, Enum):
    """Query parameters accepted by the API, valued by their wire literal."""

    SOUNDS_LIKE = "sl"
    MEANS_LIKE = "ml"
    SPELLED_LIKE = "sp"
    TOPICS = "topics"
    SEARCH_SPACE = "v"
    MAX = "max"

    # related word constraints
    NOUNS_MODIFIED_BY = "rel_jja"
    ADJECTIVES_MODIFYING = "rel_jjb"
    SYNONYMS_OF = "rel_syn"
    TRIGGERS = "rel_trg"
    ANTONYMS_OF = "rel_ant"
    KIND_OF = "rel_spc"
    MORE_GENERAL_THAN = "rel_gen"
    COMPRISES = "rel_com"
    PART_OF = "rel_par"
    FOLLOWS = "rel_bga"
    PRECEDES = "rel_bgb"
    RHYMES_WITH = "rel_rhy"
    RHYMES_ALMOST_WITH = "rel_nry"
    HOMOPHONES_OF = "rel_hom"
    CONSONANT_MATCHES = "rel_cns"

    # context words
    LEFT = "lc"
    RIGHT = "rc"

    METADATA = "md"


class SearchSpace(str, Enum):
    """Vocabularies other than the default English one."""

    SPANISH_BOOKS = "es"
    ENGLISH_WIKIPEDIA = "enwiki"


class MetadataFlag(str, Enum):
    """Single character codes requesting extra detail per result."""

    DEFINITIONS = "d"
    PARTS_OF_SPEECH = "p"
    SYLLABLE_COUNT = "s"
    PRONUNCIATION = "r"
    WORD_FREQUENCY = "f"


RELATION_KEYS: FrozenSet[OptionKey] = frozenset(
    key for key in OptionKey if key.value.startswith("rel_")
)
SIDE_KEYS: FrozenSet[OptionKey] = frozenset({OptionKey.LEFT, OptionKey.RIGHT})

# Friendly names used on the command line.
RELATION_NAMES: Dict[str, OptionKey] = {
    "nouns-modified-by": OptionKey.NOUNS_MODIFIED_BY,
    "adjectives-modifying": OptionKey.ADJECTIVES_MODIFYING,
    "synonyms": OptionKey.SYNONYMS_OF,
    "triggers": OptionKey.TRIGGERS,
    "antonyms": OptionKey.ANTONYMS_OF,
    "kind-of": OptionKey.KIND_OF,
    "more-general-than": OptionKey.MORE_GENERAL_THAN,
    "comprises": OptionKey.COMPRISES,
    "part-of": OptionKey.PART_OF,
    "follows": OptionKey.FOLLOWS,
    "precedes": OptionKey.PRECEDES,
    "rhymes": OptionKey.RHYMES_WITH,
    "near-rhymes": OptionKey.RHYMES_ALMOST_WITH,
    "homophones": OptionKey.HOMOPHONES_OF,
    "consonant-matches": OptionKey.CONSONANT_MATCHES,
}

SEARCH_SPACE_NAMES: Dict[str, SearchSpace] = {
    "spanish": SearchSpace.SPANISH_BOOKS,
    "wikipedia": SearchSpace.ENGLISH_WIKIPEDIA,
}


def relation_key(name: str) -> OptionKey:
    """Resolve a friendly relation name or a raw ``rel_*`` literal."""

    lowered = name.strip().lower()
    if lowered in RELATION_NAMES:
        return RELATION_NAMES[lowered]
    try:
        key = OptionKey(lowered)
    except ValueError:
        raise ValueError(f"Unknown relation: {name}") from None
    if key not in RELATION_KEYS:
        raise ValueError(f"{name} is not a relational constraint")
    return key
