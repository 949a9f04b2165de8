"""
Finding API data models

Requests are plain dataclasses built from the command line. Responses are
pydantic models over the service's JSON format, which wraps every value in
a single-element list ({"itemId": ["123"]}).
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .config import DEFAULT_ITEMS_PER_PAGE
from .filters import ItemFilterType


@dataclass
class ItemFilter:
    """One named constraint sent to the service, e.g. MaxPrice=100"""
    name: ItemFilterType
    values: List[str] = field(default_factory=list)


@dataclass
class SearchRequest:
    """A findItemsByKeywords call"""
    keywords: str
    entries_per_page: int = DEFAULT_ITEMS_PER_PAGE
    item_filters: List[ItemFilter] = field(default_factory=list)

    def to_params(self) -> Dict[str, str]:
        params = {
            'keywords': self.keywords,
            'paginationInput.entriesPerPage': str(self.entries_per_page),
        }
        for i, item_filter in enumerate(self.item_filters):
            params[f'itemFilter({i}).name'] = item_filter.name.value
            for j, value in enumerate(item_filter.values):
                params[f'itemFilter({i}).value({j})'] = value
        return params


@dataclass
class TimeLeft:
    """Remaining listing time, broken down the way the report prints it"""
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __str__(self) -> str:
        parts = []
        if self.months:
            parts.append(f"{self.months} months")
        if self.days:
            parts.append(f"{self.days} days")
        parts.append(f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}")
        return " ".join(parts)


_DURATION_RE = re.compile(
    r'^P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<days>\d+)D)?'
    r'(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$'
)


def parse_time_left(duration: str) -> Optional[TimeLeft]:
    """
    Parse an xs:duration such as "P2DT3H4M5S".

    Years are folded into months. Returns None for anything unparseable.
    """
    match = _DURATION_RE.match(duration.strip())
    if not match or duration.strip() == 'P':
        return None
    parts = {k: v for k, v in match.groupdict().items() if v}
    return TimeLeft(
        months=int(parts.get('years', 0)) * 12 + int(parts.get('months', 0)),
        days=int(parts.get('days', 0)),
        hours=int(parts.get('hours', 0)),
        minutes=int(parts.get('minutes', 0)),
        seconds=int(float(parts.get('seconds', 0))),
    )


def _unwrap(value: Any) -> Any:
    if isinstance(value, list):
        return value[0] if value else None
    return value


class FindingModel(BaseModel):
    """Base for every object in a Finding API JSON response"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        frozen=True,
    )

    # Fields that really are lists; everything else is unwrapped
    repeated_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode='before')
    @classmethod
    def unwrap_lists(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        names = {}
        for name, info in cls.model_fields.items():
            names[name] = name
            if info.alias:
                names[info.alias] = name
        return {
            key: value if names.get(key) in cls.repeated_fields else _unwrap(value)
            for key, value in data.items()
        }


class Amount(FindingModel):
    value: float = Field(alias='__value__')
    currency_id: Optional[str] = Field(default=None, alias='@currencyId')

    def __str__(self) -> str:
        return f"{self.value} {self.currency_id or ''}".strip()


class Distance(FindingModel):
    value: float = Field(alias='__value__')
    unit: Optional[str] = Field(default=None, alias='@unit')

    def __str__(self) -> str:
        return f"{self.value} {self.unit or ''}".strip()


class ProductId(FindingModel):
    value: str = Field(alias='__value__')
    type: Optional[str] = Field(default=None, alias='@type')

    def __str__(self) -> str:
        return f"{self.type}:{self.value}" if self.type else self.value


class Category(FindingModel):
    category_id: Optional[str] = None
    category_name: Optional[str] = None


class Condition(FindingModel):
    condition_id: Optional[str] = None
    condition_display_name: Optional[str] = None


class StoreInfo(FindingModel):
    store_name: Optional[str] = None
    store_url: Optional[str] = Field(default=None, alias='storeURL')


class SellerInfo(FindingModel):
    seller_user_name: Optional[str] = None
    feedback_score: Optional[int] = None
    positive_feedback_percent: Optional[float] = None
    feedback_rating_star: Optional[str] = None
    top_rated_seller: Optional[bool] = None


class ShippingInfo(FindingModel):
    repeated_fields = frozenset({'ship_to_locations'})

    shipping_service_cost: Optional[Amount] = None
    shipping_type: Optional[str] = None
    ship_to_locations: List[str] = Field(default_factory=list)
    expedited_shipping: Optional[bool] = None
    one_day_shipping_available: Optional[bool] = None
    handling_time: Optional[int] = None


class SellingStatus(FindingModel):
    current_price: Optional[Amount] = None
    converted_current_price: Optional[Amount] = None
    bid_count: Optional[int] = None
    selling_state: Optional[str] = None
    time_left: Optional[str] = None

    @property
    def time_left_parts(self) -> Optional[TimeLeft]:
        if not self.time_left:
            return None
        return parse_time_left(self.time_left)


class ListingInfo(FindingModel):
    listing_type: Optional[str] = None
    buy_it_now_available: Optional[bool] = None
    buy_it_now_price: Optional[Amount] = None
    best_offer_enabled: Optional[bool] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    gift: Optional[bool] = None


class SearchItem(FindingModel):
    """One item record from searchResult.item"""
    repeated_fields = frozenset({'payment_method', 'gallery_plus_picture_url'})

    item_id: str
    title: Optional[str] = None
    global_id: Optional[str] = None
    subtitle: Optional[str] = None
    primary_category: Optional[Category] = None
    secondary_category: Optional[Category] = None
    gallery_url: Optional[str] = Field(default=None, alias='galleryURL')
    view_item_url: Optional[str] = Field(default=None, alias='viewItemURL')
    product_id: Optional[ProductId] = None
    charity_id: Optional[str] = None
    payment_method: List[str] = Field(default_factory=list)
    auto_pay: Optional[bool] = None
    postal_code: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    store_info: Optional[StoreInfo] = None
    seller_info: Optional[SellerInfo] = None
    shipping_info: Optional[ShippingInfo] = None
    selling_status: Optional[SellingStatus] = None
    listing_info: Optional[ListingInfo] = None
    returns_accepted: Optional[bool] = None
    gallery_plus_picture_url: List[str] = Field(default_factory=list, alias='galleryPlusPictureURL')
    compatibility: Optional[str] = None
    distance: Optional[Distance] = None
    condition: Optional[Condition] = None
    is_multi_variation_listing: Optional[bool] = None
    top_rated_listing: Optional[bool] = None


class ErrorData(FindingModel):
    error_id: Optional[str] = None
    domain: Optional[str] = None
    severity: Optional[str] = None
    category: Optional[str] = None
    message: Optional[str] = None
    subdomain: Optional[str] = None


class ErrorMessage(FindingModel):
    repeated_fields = frozenset({'error'})

    error: List[ErrorData] = Field(default_factory=list)


class SearchResult(FindingModel):
    repeated_fields = frozenset({'item'})

    count: int = Field(default=0, alias='@count')
    item: List[SearchItem] = Field(default_factory=list)


class PaginationOutput(FindingModel):
    page_number: Optional[int] = None
    entries_per_page: Optional[int] = None
    total_pages: Optional[int] = None
    total_entries: Optional[int] = None


class FindItemsResponse(FindingModel):
    """Body of findItemsByKeywordsResponse"""
    ack: str
    version: Optional[str] = None
    timestamp: Optional[datetime] = None
    search_result: Optional[SearchResult] = None
    pagination_output: Optional[PaginationOutput] = None
    item_search_url: Optional[str] = Field(default=None, alias='itemSearchURL')
    error_message: Optional[ErrorMessage] = None

    ROOT_KEY: ClassVar[str] = 'findItemsByKeywordsResponse'

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'FindItemsResponse':
        """Validate the full JSON document returned by the service"""
        return cls.model_validate(_unwrap(payload[cls.ROOT_KEY]))

    @property
    def is_failure(self) -> bool:
        return self.ack.lower() == 'failure'

    @property
    def count(self) -> int:
        return self.search_result.count if self.search_result else 0

    @property
    def items(self) -> List[SearchItem]:
        return self.search_result.item if self.search_result else []

    @property
    def errors(self) -> List[ErrorData]:
        return self.error_message.error if self.error_message else []
