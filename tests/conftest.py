from __future__ import annotations

import json

import httpx
import pytest

from onelook_search.client import DatamuseClient
from onelook_search.config import Settings

WREAK_RESULTS = [
    {"word": "havoc", "score": 1301, "tags": ["n"]},
    {"word": "vengeance", "score": 1044, "numSyllables": 2},
    {
        "word": "revenge",
        "score": 722,
        "defs": ["n\taction taken in return for an injury or offense"],
        "tags": ["n", "pron:R IY0 V EH1 N JH ", "f:18.553"],
    },
]


@pytest.fixture()
def requests_seen():
    return []


@pytest.fixture()
def make_client(requests_seen):
    """Build a client whose HTTP layer answers with ``status`` and ``body``."""

    def factory(body=WREAK_RESULTS, status=200, handler=None):
        def respond(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if isinstance(body, (bytes, str)):
                content = body if isinstance(body, bytes) else body.encode("utf-8")
            else:
                content = json.dumps(body).encode("utf-8")
            return httpx.Response(status, content=content)

        transport = httpx.MockTransport(handler or respond)
        return DatamuseClient(Settings(), http_client=httpx.AsyncClient(transport=transport))

    return factory


@pytest.fixture()
def wreak_results():
    return WREAK_RESULTS
