import copy

import pytest

ITEM = {
    "itemId": ["110123456789"],
    "title": ["Nikon F3 35mm SLR Film Camera Body"],
    "globalId": ["EBAY-US"],
    "primaryCategory": [{"categoryId": ["15230"], "categoryName": ["Film Cameras"]}],
    "galleryURL": ["https://thumbs.ebaystatic.com/pict/110123456789.jpg"],
    "viewItemURL": ["https://www.ebay.com/itm/110123456789"],
    "productId": [{"@type": "ReferenceID", "__value__": "2468"}],
    "paymentMethod": ["PayPal", "CreditCard"],
    "autoPay": ["false"],
    "postalCode": ["94105"],
    "location": ["San Francisco,CA,USA"],
    "country": ["US"],
    "sellerInfo": [{
        "sellerUserName": ["camerashop"],
        "feedbackScore": ["1520"],
        "positiveFeedbackPercent": ["99.8"],
        "topRatedSeller": ["true"],
    }],
    "shippingInfo": [{
        "shippingServiceCost": [{"@currencyId": "USD", "__value__": "12.0"}],
        "shippingType": ["Flat"],
        "shipToLocations": ["US", "CA"],
        "expeditedShipping": ["true"],
        "oneDayShippingAvailable": ["false"],
        "handlingTime": ["2"],
    }],
    "sellingStatus": [{
        "currentPrice": [{"@currencyId": "USD", "__value__": "149.5"}],
        "convertedCurrentPrice": [{"@currencyId": "USD", "__value__": "149.5"}],
        "bidCount": ["7"],
        "sellingState": ["Active"],
        "timeLeft": ["P1DT2H3M4S"],
    }],
    "listingInfo": [{
        "bestOfferEnabled": ["false"],
        "buyItNowAvailable": ["false"],
        "startTime": ["2024-03-01T18:30:00.000Z"],
        "endTime": ["2024-03-08T18:30:05.000Z"],
        "listingType": ["Auction"],
        "gift": ["false"],
    }],
    "returnsAccepted": ["true"],
    "condition": [{"conditionId": ["3000"], "conditionDisplayName": ["Used"]}],
    "isMultiVariationListing": ["false"],
    "topRatedListing": ["false"],
}


def make_payload(items, ack="Success", **extra):
    body = {
        "ack": [ack],
        "version": ["1.13.0"],
        "timestamp": ["2024-03-06T10:00:00.000Z"],
        "searchResult": [{"@count": str(len(items)), "item": items}],
        "paginationOutput": [{
            "pageNumber": ["1"],
            "entriesPerPage": ["10"],
            "totalPages": ["1"],
            "totalEntries": [str(len(items))],
        }],
        "itemSearchURL": ["https://www.ebay.com/sch/i.html?_nkw=nikon"],
    }
    body.update(extra)
    return {"findItemsByKeywordsResponse": [body]}


@pytest.fixture
def payload_factory():
    """Factory fixture that wraps item dicts into a full response document."""
    return make_payload


@pytest.fixture
def item_data():
    """Raw JSON for one fully populated item"""
    return copy.deepcopy(ITEM)


@pytest.fixture
def success_payload(item_data):
    return make_payload([item_data])


@pytest.fixture
def failure_payload():
    payload = make_payload([], ack="Failure", errorMessage=[{
        "error": [{
            "errorId": ["11"],
            "domain": ["Marketplace"],
            "severity": ["Error"],
            "category": ["Request"],
            "message": ["Invalid value for MaxPrice."],
            "subdomain": ["Search"],
        }]
    }])
    del payload["findItemsByKeywordsResponse"][0]["searchResult"]
    return payload


@pytest.fixture
def app_id(monkeypatch):
    monkeypatch.setenv("EBAY_API_APP_ID", "TestApp-finditem-PRD-1234567890")
    return "TestApp-finditem-PRD-1234567890"
