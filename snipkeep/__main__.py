from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from snipkeep.application.dto.snippet_query_dto import SnippetQuery
from snipkeep.config import load_config
from snipkeep.errors import SnipKeepError
from snipkeep.infrastructure.composition import get_search_service
from snipkeep.observability import setup_structlog_logging


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snipkeep", description="Fuzzy search your snippets")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-l", "--language", help="only snippets in this language")
    group.add_argument("-t", "--tag", help="only snippets with this tag")
    parser.add_argument("--color", help="highlight color of the selected line")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        cfg = load_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    setup_structlog_logging(cfg.LOG_LEVEL, cfg.LOG_FORMAT)

    if args.language:
        query = SnippetQuery.by_language(args.language)
    elif args.tag:
        query = SnippetQuery.by_tag(args.tag)
    else:
        query = SnippetQuery.all()

    try:
        outcome = get_search_service(cfg).search_store(query, highlight_color=args.color)
    except SnipKeepError as e:
        print(str(e), file=sys.stderr)
        return 1

    for failure in outcome.failures:
        print(f"#{failure.index}: {failure.error}", file=sys.stderr)
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
