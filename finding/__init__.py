from .client import FindingClient, find_items_sync
from .filters import ItemFilterType, OPTION_CATALOG, build_option_catalog
from .models import FindItemsResponse, ItemFilter, SearchItem, SearchRequest
from .request import build_request

__all__ = [
    'FindingClient',
    'find_items_sync',
    'ItemFilterType',
    'OPTION_CATALOG',
    'build_option_catalog',
    'FindItemsResponse',
    'ItemFilter',
    'SearchItem',
    'SearchRequest',
    'build_request',
]
