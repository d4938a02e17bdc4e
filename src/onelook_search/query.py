"""Serialize an option mapping into a ``/words`` request URL."""
from __future__ import annotations

from typing import Mapping, Sequence
from urllib.parse import quote

from .config import DEFAULT_BASE_URL
from .options import OptionKey

# ``*`` and ``?`` are the service's own wildcard syntax for spelled-like patterns.
SAFE_CHARACTERS = "*?"


def encode_value(key: OptionKey, values: Sequence[str]) -> str:
    encoded = [quote(str(value), safe=SAFE_CHARACTERS) for value in values]
    if key is OptionKey.TOPICS:
        return ",".join(encoded)
    return "".join(encoded)


def build_query(options: Mapping[OptionKey, Sequence[str]]) -> str:
    """Return ``key=value`` pairs joined with ``&`` in mapping order."""

    return "&".join(f"{key.value}={encode_value(key, values)}" for key, values in options.items())


def build_url(options: Mapping[OptionKey, Sequence[str]], base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url}?{build_query(options)}"
