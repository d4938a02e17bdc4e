"""Query builder for the Datamuse/OneLook ``/words`` endpoint."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Union

from .client import DatamuseClient
from .config import load_settings
from .models import SearchOutcome, TransportFailure
from .options import RELATION_KEYS, SIDE_KEYS, MetadataFlag, OptionKey, SearchSpace
from .query import build_url

LOGGER = logging.getLogger(__name__)


class SearchConsumedError(RuntimeError):
    """Raised when a builder is touched after :meth:`Search.search` ran."""


class Search:
    """Accumulate constraints, then run a single search.

    Setters return the builder so calls can be chained::

        outcome = await Search().related(OptionKey.FOLLOWS, "wreak").max_results(10).search()
    """

    def __init__(self, client: Optional[DatamuseClient] = None):
        self.client = client
        self._options: Dict[OptionKey, List[str]] = {}
        self._metadata: List[MetadataFlag] = []
        self._consumed = False

    @property
    def options(self) -> Dict[OptionKey, List[str]]:
        return {key: list(values) for key, values in self._options.items()}

    @property
    def metadata(self) -> str:
        return "".join(flag.value for flag in self._metadata)

    @property
    def consumed(self) -> bool:
        return self._consumed

    # ------------------------------------------------------------------
    def sounds_like(self, word: str) -> "Search":
        return self._set(OptionKey.SOUNDS_LIKE, [word])

    def means_like(self, word: str) -> "Search":
        return self._set(OptionKey.MEANS_LIKE, [word])

    def spelled_like(self, pattern: str) -> "Search":
        return self._set(OptionKey.SPELLED_LIKE, [pattern])

    def topics(self, topics: Union[str, Iterable[str]]) -> "Search":
        if isinstance(topics, str):
            topics = [topics]
        return self._set(OptionKey.TOPICS, list(topics))

    def related(self, key: OptionKey, word: str) -> "Search":
        """Constrain results by a lexical relation (``rel_*``) or context word."""

        key = OptionKey(key)
        if key not in RELATION_KEYS and key not in SIDE_KEYS:
            raise ValueError(f"{key.value} is not a relational constraint")
        return self._set(key, [word])

    def search_space(self, space: SearchSpace) -> "Search":
        return self._set(OptionKey.SEARCH_SPACE, [SearchSpace(space).value])

    def max_results(self, limit: int) -> "Search":
        return self._set(OptionKey.MAX, [str(limit)])

    def word_on_the(self, side: OptionKey, word: str) -> "Search":
        side = OptionKey(side)
        if side not in SIDE_KEYS:
            raise ValueError(f"{side.value} is not a left or right context key")
        return self._set(side, [word])

    def with_definitions(self) -> "Search":
        return self._flag(MetadataFlag.DEFINITIONS)

    def with_parts_of_speech(self) -> "Search":
        return self._flag(MetadataFlag.PARTS_OF_SPEECH)

    def with_syllable_count(self) -> "Search":
        return self._flag(MetadataFlag.SYLLABLE_COUNT)

    def with_pronunciation(self) -> "Search":
        return self._flag(MetadataFlag.PRONUNCIATION)

    def with_word_frequency(self) -> "Search":
        return self._flag(MetadataFlag.WORD_FREQUENCY)

    # ------------------------------------------------------------------
    def finalized_options(self) -> Dict[OptionKey, List[str]]:
        """Return the option mapping with the metadata flags folded in last."""

        options = self.options
        options[OptionKey.METADATA] = [self.metadata]
        return options

    def url(self, base_url: Optional[str] = None) -> str:
        if base_url is None:
            base_url = self.client.base_url if self.client else load_settings().base_url
        return build_url(self.finalized_options(), base_url)

    async def search(
        self, callback: Optional[Callable[[SearchOutcome], None]] = None
    ) -> SearchOutcome:
        """Run the query once and deliver the outcome.

        ``callback`` is invoked exactly once with the outcome, which is also
        returned. The builder cannot be reused afterwards.
        """

        self._ensure_open()
        self._consumed = True
        if self.client is None:
            async with DatamuseClient() as client:
                outcome = await self._fetch(client)
        else:
            outcome = await self._fetch(self.client)
        if not outcome.ok:
            LOGGER.info("Search failed: %s", type(outcome).__name__)
        if callback is not None:
            callback(outcome)
        return outcome

    # ------------------------------------------------------------------
    async def _fetch(self, client: DatamuseClient) -> SearchOutcome:
        try:
            url = build_url(self.finalized_options(), client.base_url)
        except UnicodeEncodeError as exc:
            LOGGER.warning("Could not encode query for %s: %s", client.base_url, exc)
            return TransportFailure(url=client.base_url, reason=f"could not encode query: {exc}")
        return await client.fetch(url)

    def _set(self, key: OptionKey, values: List[str]) -> "Search":
        self._ensure_open()
        self._options[key] = values
        return self

    def _flag(self, flag: MetadataFlag) -> "Search":
        self._ensure_open()
        if flag not in self._metadata:
            self._metadata.append(flag)
        return self

    def _ensure_open(self) -> None:
        if self._consumed:
            raise SearchConsumedError("search() already ran; build a new Search")
