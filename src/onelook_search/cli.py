"""Command line interface for one-shot word searches."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from tabulate import tabulate

from .client import DatamuseClient
from .config import load_settings
from .models import (
    DecodeFailure,
    HttpStatusFailure,
    SearchOutcome,
    TransportFailure,
    WordResult,
)
from .options import RELATION_NAMES, SEARCH_SPACE_NAMES, OptionKey, relation_key
from .search import Search

LOGGER = logging.getLogger("onelook_search")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find words with the Datamuse/OneLook API")
    parser.add_argument("--sounds-like", help="Words that sound like this")
    parser.add_argument("--means-like", help="Words with a meaning similar to this")
    parser.add_argument("--spelled-like", help="Spelling pattern (* and ? wildcards)")
    parser.add_argument("--topics", nargs="+", help="Topic words to bias results towards")
    parser.add_argument(
        "--rel",
        nargs=2,
        action="append",
        metavar=("RELATION", "WORD"),
        help="Related word constraint, e.g. --rel follows wreak. Relations: "
        + ", ".join(sorted(RELATION_NAMES)),
    )
    parser.add_argument("--left", help="Word that appears immediately to the left")
    parser.add_argument("--right", help="Word that appears immediately to the right")
    parser.add_argument("--space", choices=sorted(SEARCH_SPACE_NAMES), help="Alternative vocabulary")
    parser.add_argument("--max", type=int, help="Maximum number of results")
    parser.add_argument("--definitions", action="store_true", help="Include definitions")
    parser.add_argument("--pos", action="store_true", help="Include parts of speech")
    parser.add_argument("--syllables", action="store_true", help="Include syllable counts")
    parser.add_argument("--pronunciation", action="store_true", help="Include pronunciations")
    parser.add_argument("--frequency", action="store_true", help="Include word frequency")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    parser.add_argument("--show-url", action="store_true", help="Print the request URL before searching")
    parser.add_argument("--base-url", help="Override the API endpoint")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_search(args: argparse.Namespace, client: Optional[DatamuseClient] = None) -> Search:
    search = Search(client)
    if args.sounds_like:
        search.sounds_like(args.sounds_like)
    if args.means_like:
        search.means_like(args.means_like)
    if args.spelled_like:
        search.spelled_like(args.spelled_like)
    if args.topics:
        search.topics(args.topics)
    for name, word in args.rel or []:
        search.related(relation_key(name), word)
    if args.left:
        search.word_on_the(OptionKey.LEFT, args.left)
    if args.right:
        search.word_on_the(OptionKey.RIGHT, args.right)
    if args.space:
        search.search_space(SEARCH_SPACE_NAMES[args.space])
    if args.max is not None:
        search.max_results(args.max)
    if args.definitions:
        search.with_definitions()
    if args.pos:
        search.with_parts_of_speech()
    if args.syllables:
        search.with_syllable_count()
    if args.pronunciation:
        search.with_pronunciation()
    if args.frequency:
        search.with_word_frequency()
    return search


def _has_constraint(args: argparse.Namespace) -> bool:
    return any(
        [
            args.sounds_like,
            args.means_like,
            args.spelled_like,
            args.topics,
            args.rel,
            args.left,
            args.right,
        ]
    )


async def run(args: argparse.Namespace) -> SearchOutcome:
    settings = load_settings(base_url=args.base_url, timeout=args.timeout)
    async with DatamuseClient(settings) as client:
        search = build_search(args, client)
        if args.show_url:
            try:
                print(search.url())
            except UnicodeEncodeError as exc:
                LOGGER.warning("Could not encode query: %s", exc)
        return await search.search()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not _has_constraint(args):
        parser.error("at least one word constraint is required (e.g. --rel follows wreak)")
    for name, _word in args.rel or []:
        try:
            relation_key(name)
        except ValueError as exc:
            parser.error(str(exc))

    outcome = asyncio.run(run(args))
    if not outcome.ok:
        print(f"Search failed: {describe_failure(outcome)}", file=sys.stderr)
        return 1

    words = outcome.words or []
    if args.json:
        print(json.dumps([_result_to_dict(result) for result in words], indent=2))
    else:
        _print_results(words)
    return 0


def describe_failure(outcome: SearchOutcome) -> str:
    if isinstance(outcome, TransportFailure):
        return f"could not reach {outcome.url}: {outcome.reason}"
    if isinstance(outcome, HttpStatusFailure):
        return f"HTTP {outcome.status_code} from {outcome.url}"
    if isinstance(outcome, DecodeFailure):
        return f"unreadable response ({outcome.kind.value}): {outcome.detail}"
    return "unknown error"


def _result_to_dict(result: WordResult) -> dict:
    data = {"word": result.word}
    if result.score is not None:
        data["score"] = result.score
    if result.num_syllables is not None:
        data["numSyllables"] = result.num_syllables
    if result.defs is not None:
        data["defs"] = list(result.defs)
    if result.tags is not None:
        data["tags"] = list(result.tags)
    return data


def _print_results(results: List[WordResult]) -> None:
    if not results:
        print("No matches found")
        return
    rows = []
    for result in results:
        pronunciation = result.pronunciation
        definitions = result.definitions
        frequency = result.frequency
        rows.append(
            [
                result.word,
                result.score if result.score is not None else "",
                result.num_syllables if result.num_syllables is not None else "",
                ", ".join(result.parts_of_speech),
                pronunciation.text if pronunciation else "",
                f"{frequency:.2f}" if frequency is not None else "",
                definitions[0].definition if definitions else "",
            ]
        )
    headers = ["Word", "Score", "Syllables", "POS", "Pronunciation", "Freq/M", "Definition"]
    print(tabulate(rows, headers=headers))


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
