"""
Report formatter - renders Finding API results as plain text

Every item is printed as a fixed sequence of "label: value" lines. Missing
values and missing groups print as "null"; the block ends with "----".
"""

from datetime import datetime, timezone
from typing import Any, Iterator, List

from finding.models import FindItemsResponse, ListingInfo, SearchItem, SellingStatus

SEPARATOR = "----"
END_TIME_FORMAT = "%m/%d/%Y %H:%M:%S %Z"


def fmt(value: Any) -> str:
    """Render one field value"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ", ".join(fmt(v) for v in value) + "]"
    if isinstance(value, datetime):
        return format_end_time(value)
    return str(value)


def format_end_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(END_TIME_FORMAT)


def _amount_lines(label: str, amount) -> List[str]:
    if amount is None:
        return [f"  {label}: null"]
    return [
        f"  {label}: value: {fmt(amount.value)}",
        f"  {label}: currencyId: {fmt(amount.currency_id)}",
    ]


def _selling_status_lines(status: SellingStatus) -> Iterator[str]:
    yield "sellingStatus:"
    yield from _amount_lines("currentPrice", status.current_price)
    yield from _amount_lines("convertedCurrentPrice", status.converted_current_price)
    yield f"  bidCount: {fmt(status.bid_count)}"
    yield f"  sellingState: {fmt(status.selling_state)}"
    time_left = status.time_left_parts
    if time_left is None and status.time_left:
        # unparseable duration, show it as received
        yield f"  timeLeft: {status.time_left}"
    else:
        yield f"  timeLeft: {fmt(time_left)}"


def _listing_info_lines(listing: ListingInfo) -> Iterator[str]:
    yield "listingInfo:"
    yield f"   listingType: {fmt(listing.listing_type)}"
    yield f"   buyItNowAvailable: {fmt(listing.buy_it_now_available)}"
    yield f"   buyItNowPrice: {fmt(listing.buy_it_now_price)}"
    yield f"   bestOfferEnabled: {fmt(listing.best_offer_enabled)}"
    yield f"   endTime: {fmt(listing.end_time)}"


def item_lines(item: SearchItem) -> Iterator[str]:
    yield f"itemId: {fmt(item.item_id)}"
    yield f"title: {fmt(item.title)}"
    yield f"globalId: {fmt(item.global_id)}"

    if item.condition:
        yield "condition:"
        yield f"  conditionId: {fmt(item.condition.condition_id)}"
        yield f"  conditionDisplayName: {fmt(item.condition.condition_display_name)}"
    else:
        yield "condition: null"

    yield f"viewItemURL: {fmt(item.view_item_url)}"
    yield f"galleryURL: {fmt(item.gallery_url)}"
    yield f"subtitle: {fmt(item.subtitle)}"

    for label, category in (("primaryCategory", item.primary_category),
                            ("secondaryCategory", item.secondary_category)):
        if category:
            yield f"{label}:"
            yield f"  categoryName: {fmt(category.category_name)}"
            yield f"  categoryId: {fmt(category.category_id)}"
        else:
            yield f"{label}: null"

    yield f"charityId: {fmt(item.charity_id)}"
    yield f"productId: {fmt(item.product_id)}"
    yield f"paymentMethod: {fmt(item.payment_method)}"
    yield f"autoPay: {fmt(item.auto_pay)}"
    yield f"postalCode: {fmt(item.postal_code)}"
    yield f"location: {fmt(item.location)}"
    yield f"country: {fmt(item.country)}"

    if item.store_info:
        yield "storeInfo:"
        yield f"  storeName: {fmt(item.store_info.store_name)}"
        yield f"  storeURL: {fmt(item.store_info.store_url)}"
    else:
        yield "storeInfo: null"

    seller = item.seller_info
    if seller:
        yield "sellerInfo:"
        yield f"  sellerUserName: {fmt(seller.seller_user_name)}"
        yield f"  feedbackScore: {fmt(seller.feedback_score)}"
        yield f"  positiveFeedbackPercent: {fmt(seller.positive_feedback_percent)}"
        yield f"  topRatedSeller: {fmt(seller.top_rated_seller)}"
    else:
        yield "sellerInfo: null"

    shipping = item.shipping_info
    if shipping:
        yield "shippingInfo:"
        yield f"  type: {fmt(shipping.shipping_type)}"
        yield f"  shippingServiceCost: {fmt(shipping.shipping_service_cost)}"
        yield f"  shipToLocations: {fmt(shipping.ship_to_locations)}"
        yield f"  expeditedShipping: {fmt(shipping.expedited_shipping)}"
        yield f"  oneDayShippingAvailable: {fmt(shipping.one_day_shipping_available)}"
        yield f"  handlingTime: {fmt(shipping.handling_time)}"
    else:
        yield "shippingInfo: null"

    if item.selling_status:
        yield from _selling_status_lines(item.selling_status)
    else:
        yield "sellingStatus: null"

    if item.listing_info:
        yield from _listing_info_lines(item.listing_info)
    else:
        yield "listingInfo: null"

    yield f"returnsAccepted: {fmt(item.returns_accepted)}"
    yield f"galleryPlusPictureURL: {fmt(item.gallery_plus_picture_url)}"
    yield f"compatibility: {fmt(item.compatibility)}"
    yield f"distance: {fmt(item.distance)}"
    yield SEPARATOR


def format_item(item: SearchItem) -> str:
    """Full text report for one item"""
    return "\n".join(item_lines(item))


def format_results(response: FindItemsResponse) -> str:
    """
    Acknowledgement line, item count and one block per item.

    On a Failure acknowledgement only the ack line is returned.
    """
    lines = [f"Query Results = {response.ack}"]
    if response.is_failure:
        return lines[0]

    lines.append(f"Found {response.count} items.")
    for item in response.items:
        lines.append(format_item(item))
    return "\n".join(lines)
