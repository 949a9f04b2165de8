#!/usr/bin/env python3
"""
FindItem - eBay Auction Search CLI

Usage:
    python search.py "vintage camera"
    python search.py --max_price 100 --listing_type Auction nikon f3
    python search.py --numb_items_to_return 25 running shoes
    python search.py --help

Every eBay Finding API item filter is accepted as --filter_name value.
EBAY_API_APP_ID must hold a valid eBay API Application ID.
"""

import logging
import sys
from typing import List, Optional, Sequence

from finding import config
from finding.client import find_items_sync
from finding.errors import ConfigError, FindItemError, HelpRequested, UsageError
from finding.filters import OPTION_CATALOG
from finding.request import build_request
from utils.cmdline import parse_cmdline, usage_text
from utils.report import format_results

log = logging.getLogger("finditem")


def setup_logging(level: str = config.LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_search(args: List[str]) -> int:
    """parse -> validate -> build request -> call service -> print report"""
    if not args:
        raise UsageError(usage_text(OPTION_CATALOG))

    parsed = parse_cmdline(args, OPTION_CATALOG)

    app_id = config.get_app_id()
    if not app_id:
        raise ConfigError(
            f"Error: Environment variable {config.APP_ID_ENV} must "
            "have the value of a valid eBay API Application ID."
        )

    request = build_request(parsed)
    log.info("Searching for '%s' (%d per page, %d filters)",
             request.keywords, request.entries_per_page, len(request.item_filters))

    response = find_items_sync(app_id, request)
    print(format_results(response))

    if response.is_failure:
        for error in response.errors:
            print(f"{error.severity or 'Error'} {error.error_id}: {error.message}", file=sys.stderr)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return run_search(args)
    except (HelpRequested, UsageError) as e:
        print(e)
        return e.exit_code
    except FindItemError as e:
        print(e, file=sys.stderr)
        return e.exit_code


def run():
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
