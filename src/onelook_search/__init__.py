"""Query builder and async client for the Datamuse/OneLook word-finding API."""

from .client import DatamuseClient, DecodeError, decode_words
from .config import Settings, load_settings
from .models import (
    DecodeErrorKind,
    DecodeFailure,
    Definition,
    HttpStatusFailure,
    SearchOutcome,
    SearchSuccess,
    TransportFailure,
    WordResult,
)
from .options import MetadataFlag, OptionKey, SearchSpace
from .query import build_query, build_url
from .search import Search, SearchConsumedError

__all__ = [
    "DatamuseClient",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeFailure",
    "Definition",
    "HttpStatusFailure",
    "MetadataFlag",
    "OptionKey",
    "Search",
    "SearchConsumedError",
    "SearchOutcome",
    "SearchSpace",
    "SearchSuccess",
    "Settings",
    "TransportFailure",
    "WordResult",
    "build_query",
    "build_url",
    "decode_words",
    "load_settings",
]
