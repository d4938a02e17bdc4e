import httpx
import pytest

from onelook_search.client import DatamuseClient
from onelook_search.config import Settings
from onelook_search.models import HttpStatusFailure, SearchSuccess, TransportFailure
from onelook_search.options import OptionKey, SearchSpace
from onelook_search.search import Search, SearchConsumedError


def test_follows_query_url():
    search = Search().related(OptionKey.FOLLOWS, "wreak").max_results(10)
    assert search.url("https://api.datamuse.com/words") == (
        "https://api.datamuse.com/words?rel_bga=wreak&max=10&md="
    )


def test_setting_a_key_twice_keeps_only_the_last_value():
    search = Search().means_like("ocean").means_like("river")
    url = search.url("https://api.datamuse.com/words")
    assert "ml=river" in url
    assert "ocean" not in url


def test_relational_constraint_appears_once():
    search = Search().related(OptionKey.SYNONYMS_OF, "happy").related(OptionKey.SYNONYMS_OF, "glad")
    query = search.url("http://x/words").split("?", 1)[1]
    assert query.split("&").count("rel_syn=glad") == 1
    assert "rel_syn=happy" not in query


def test_related_rejects_non_relational_keys():
    with pytest.raises(ValueError):
        Search().related(OptionKey.MAX, "10")
    with pytest.raises(ValueError):
        Search().word_on_the(OptionKey.SYNONYMS_OF, "sea")


def test_word_on_either_side():
    search = Search().means_like("drink").word_on_the(OptionKey.LEFT, "hot").word_on_the(OptionKey.RIGHT, "cup")
    assert search.options == {
        OptionKey.MEANS_LIKE: ["drink"],
        OptionKey.LEFT: ["hot"],
        OptionKey.RIGHT: ["cup"],
    }


def test_every_setter_records_its_key():
    search = (
        Search()
        .sounds_like("jirraf")
        .means_like("animal")
        .spelled_like("g*")
        .topics(["zoo", "africa"])
        .search_space(SearchSpace.ENGLISH_WIKIPEDIA)
        .max_results(5)
    )
    assert search.options == {
        OptionKey.SOUNDS_LIKE: ["jirraf"],
        OptionKey.MEANS_LIKE: ["animal"],
        OptionKey.SPELLED_LIKE: ["g*"],
        OptionKey.TOPICS: ["zoo", "africa"],
        OptionKey.SEARCH_SPACE: ["enwiki"],
        OptionKey.MAX: ["5"],
    }


def test_single_topic_string_is_one_topic():
    search = Search().topics("sea")
    assert search.options[OptionKey.TOPICS] == ["sea"]
    assert search.url("http://x/words") == "http://x/words?topics=sea&md="


def test_metadata_flags_in_call_order_without_duplicates():
    search = (
        Search()
        .with_definitions()
        .with_parts_of_speech()
        .with_syllable_count()
        .with_pronunciation()
        .with_word_frequency()
        .with_definitions()
    )
    assert search.metadata == "dpsrf"
    assert search.finalized_options()[OptionKey.METADATA] == ["dpsrf"]
    assert search.url("http://x/words").endswith("&md=dpsrf")


@pytest.mark.asyncio
async def test_search_end_to_end(make_client, requests_seen):
    delivered = []
    async with make_client() as client:
        search = Search(client).related(OptionKey.FOLLOWS, "wreak").max_results(10)
        outcome = await search.search(delivered.append)

    assert str(requests_seen[0].url) == "https://api.datamuse.com/words?rel_bga=wreak&max=10&md="
    assert isinstance(outcome, SearchSuccess)
    assert delivered == [outcome]
    assert [result.word for result in outcome.words] == ["havoc", "vengeance", "revenge"]


@pytest.mark.asyncio
async def test_search_failure_still_calls_back_once(make_client):
    delivered = []
    async with make_client(body="", status=500) as client:
        outcome = await Search(client).sounds_like("sea").search(delivered.append)

    assert isinstance(outcome, HttpStatusFailure)
    assert delivered == [outcome]


@pytest.mark.asyncio
async def test_invalid_base_url_still_calls_back_once(requests_seen):
    transport = httpx.MockTransport(lambda request: requests_seen.append(request))
    settings = Settings(base_url="http://api.datamuse.com/wo\x00rds")
    delivered = []
    async with DatamuseClient(settings, http_client=httpx.AsyncClient(transport=transport)) as client:
        outcome = await Search(client).related(OptionKey.FOLLOWS, "wreak").search(delivered.append)

    assert isinstance(outcome, TransportFailure)
    assert delivered == [outcome]
    assert requests_seen == []


@pytest.mark.asyncio
async def test_unencodable_word_still_calls_back_once(make_client, requests_seen):
    delivered = []
    async with make_client() as client:
        outcome = await Search(client).sounds_like("sea\ud800").search(delivered.append)

    assert isinstance(outcome, TransportFailure)
    assert "encode" in outcome.reason
    assert delivered == [outcome]
    assert requests_seen == []


@pytest.mark.asyncio
async def test_builder_is_single_shot(make_client):
    async with make_client() as client:
        search = Search(client).sounds_like("sea")
        await search.search()

    assert search.consumed
    with pytest.raises(SearchConsumedError):
        search.sounds_like("see")
    with pytest.raises(SearchConsumedError):
        await search.search()
