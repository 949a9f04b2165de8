"""
Item filters accepted by the Finding API

Member names are what users type on the command line (lower-cased),
member values are the names the service expects on the wire.
"""

from enum import Enum
from typing import Tuple


# Synthetic option: not a filter, sets paginationInput.entriesPerPage
NUMB_ITEMS_TO_RETURN = "numb_items_to_return"


class ItemFilterType(Enum):
    CONDITION = "Condition"
    CURRENCY = "Currency"
    END_TIME_FROM = "EndTimeFrom"
    MOD_TIME_FROM = "ModTimeFrom"
    END_TIME_TO = "EndTimeTo"
    EXCLUDE_AUTO_PAY = "ExcludeAutoPay"
    BEST_OFFER_ONLY = "BestOfferOnly"
    FEATURED_ONLY = "FeaturedOnly"
    FEEDBACK_SCORE_MAX = "FeedbackScoreMax"
    FEEDBACK_SCORE_MIN = "FeedbackScoreMin"
    FREE_SHIPPING_ONLY = "FreeShippingOnly"
    GET_IT_FAST_ONLY = "GetItFastOnly"
    HIDE_DUPLICATE_ITEMS = "HideDuplicateItems"
    AVAILABLE_TO = "AvailableTo"
    LOCATED_IN = "LocatedIn"
    LOCAL_PICKUP_ONLY = "LocalPickupOnly"
    LOCAL_SEARCH_ONLY = "LocalSearchOnly"
    LISTING_TYPE = "ListingType"
    LOTS_ONLY = "LotsOnly"
    MAX_BIDS = "MaxBids"
    MIN_BIDS = "MinBids"
    MAX_PRICE = "MaxPrice"
    MIN_PRICE = "MinPrice"
    PAYMENT_METHOD = "PaymentMethod"
    MAX_QUANTITY = "MaxQuantity"
    MIN_QUANTITY = "MinQuantity"
    SELLER = "Seller"
    EXCLUDE_SELLER = "ExcludeSeller"
    EXCLUDE_CATEGORY = "ExcludeCategory"
    WORLD_OF_GOOD_ONLY = "WorldOfGoodOnly"
    MAX_DISTANCE = "MaxDistance"
    SELLER_BUSINESS_TYPE = "SellerBusinessType"
    TOP_RATED_SELLER_ONLY = "TopRatedSellerOnly"
    SOLD_ITEMS_ONLY = "SoldItemsOnly"
    CHARITY_ONLY = "CharityOnly"
    LISTED_IN = "ListedIn"
    EXPEDITED_SHIPPING_TYPE = "ExpeditedShippingType"
    MAX_HANDLING_TIME = "MaxHandlingTime"
    RETURNS_ACCEPTED_ONLY = "ReturnsAcceptedOnly"
    VALUE_BOX_INVENTORY = "ValueBoxInventory"
    OUTLET_SELLER_ONLY = "OutletSellerOnly"
    AUTHORIZED_SELLER_ONLY = "AuthorizedSellerOnly"
    START_TIME_FROM = "StartTimeFrom"
    START_TIME_TO = "StartTimeTo"

    @property
    def option_name(self) -> str:
        return self.name.lower()


def build_option_catalog() -> Tuple[str, ...]:
    """All accepted command-line option names, page size first"""
    return (NUMB_ITEMS_TO_RETURN,) + tuple(f.option_name for f in ItemFilterType)


def filter_type_for_option(option: str) -> ItemFilterType:
    """Map a catalog option name back to its filter (raises KeyError)"""
    return ItemFilterType[option.upper()]


OPTION_CATALOG = build_option_catalog()
