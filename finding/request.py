"""Build a SearchRequest out of parsed command-line options"""

from typing import List

from .config import DEFAULT_ITEMS_PER_PAGE, MAX_ITEMS_PER_PAGE
from .errors import InvalidPageSizeError, MissingKeywordsError
from .filters import NUMB_ITEMS_TO_RETURN, filter_type_for_option
from .models import ItemFilter, SearchRequest


def parse_page_size(value: str) -> int:
    try:
        size = int(value.strip())
    except ValueError:
        raise InvalidPageSizeError(value)
    if not 1 <= size <= MAX_ITEMS_PER_PAGE:
        raise InvalidPageSizeError(value, f"must be between 1 and {MAX_ITEMS_PER_PAGE}")
    return size


def build_item_filters(options: dict) -> List[ItemFilter]:
    """One filter per option, the page-size option excluded"""
    return [
        ItemFilter(name=filter_type_for_option(name), values=list(values))
        for name, values in options.items()
        if name != NUMB_ITEMS_TO_RETURN
    ]


def build_request(parsed) -> SearchRequest:
    """
    Turn ParsedOptions into the request sent to the service.

    Raises MissingKeywordsError when no search phrase was given and
    InvalidPageSizeError for a bad numb_items_to_return value.
    """
    if not parsed.keywords:
        raise MissingKeywordsError(parsed.as_dict())

    entries_per_page = DEFAULT_ITEMS_PER_PAGE
    page_size = parsed.get(NUMB_ITEMS_TO_RETURN)
    if page_size is not None:
        entries_per_page = parse_page_size(page_size)

    return SearchRequest(
        keywords=parsed.keywords,
        entries_per_page=entries_per_page,
        item_filters=build_item_filters(parsed.options),
    )
