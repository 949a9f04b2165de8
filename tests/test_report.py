from datetime import datetime, timezone
from unittest.mock import patch

from finding.models import FindItemsResponse, SearchItem
from utils.report import SEPARATOR, fmt, format_end_time, format_item, format_results


def _item(data) -> SearchItem:
    return SearchItem.model_validate(data)


class TestFmt:
    def test_values(self):
        assert fmt(None) == "null"
        assert fmt(True) == "true"
        assert fmt(False) == "false"
        assert fmt(["US", "CA"]) == "[US, CA]"
        assert fmt(3) == "3"

    def test_end_time(self):
        end = datetime(2024, 3, 8, 18, 30, 5, tzinfo=timezone.utc)
        assert format_end_time(end) == "03/08/2024 18:30:05 UTC"
        assert fmt(end) == "03/08/2024 18:30:05 UTC"

    def test_naive_end_time_treated_as_utc(self):
        assert format_end_time(datetime(2024, 1, 2, 3, 4, 5)) == "01/02/2024 03:04:05 UTC"


class TestFormatItem:
    def test_full_item(self, item_data):
        report = format_item(_item(item_data))
        lines = report.splitlines()
        assert lines[0] == "itemId: 110123456789"
        assert lines[1] == "title: Nikon F3 35mm SLR Film Camera Body"
        assert lines[-1] == SEPARATOR
        assert "condition:\n  conditionId: 3000\n  conditionDisplayName: Used" in report
        assert "primaryCategory:\n  categoryName: Film Cameras\n  categoryId: 15230" in report
        assert "secondaryCategory: null" in report
        assert "  shipToLocations: [US, CA]" in report
        assert "  expeditedShipping: true" in report
        assert "  currentPrice: value: 149.5" in report
        assert "  currentPrice: currencyId: USD" in report
        assert "  bidCount: 7" in report
        assert "  timeLeft: 1 days 02:03:04" in report
        assert "   endTime: 03/08/2024 18:30:05 UTC" in report
        assert "returnsAccepted: true" in report
        assert "productId: ReferenceID:2468" in report

    def test_missing_shipping_info(self, item_data):
        del item_data["shippingInfo"]
        report = format_item(_item(item_data))
        assert "shippingInfo: null" in report
        # other groups are still complete
        assert "sellingStatus:\n" in report
        assert "listingInfo:\n" in report

    def test_bare_item_prints_null_groups(self):
        report = format_item(_item({"itemId": ["1"]}))
        for label in ("condition", "primaryCategory", "shippingInfo", "sellingStatus",
                      "listingInfo", "storeInfo", "sellerInfo", "distance", "title"):
            assert f"{label}: null" in report

    def test_missing_time_left_and_end_time(self, item_data):
        del item_data["sellingStatus"][0]["timeLeft"]
        del item_data["listingInfo"][0]["endTime"]
        report = format_item(_item(item_data))
        assert "  timeLeft: null" in report
        assert "   endTime: null" in report

    def test_unparseable_time_left_shown_raw(self, item_data):
        item_data["sellingStatus"][0]["timeLeft"] = ["soon"]
        assert "  timeLeft: soon" in format_item(_item(item_data))


class TestFormatResults:
    def test_success(self, success_payload):
        output = format_results(FindItemsResponse.from_payload(success_payload))
        lines = output.splitlines()
        assert lines[0] == "Query Results = Success"
        assert lines[1] == "Found 1 items."
        assert lines[-1] == SEPARATOR

    def test_failure_prints_only_ack(self, failure_payload):
        response = FindItemsResponse.from_payload(failure_payload)
        with patch("utils.report.format_item") as mock_format:
            output = format_results(response)
        assert output == "Query Results = Failure"
        mock_format.assert_not_called()

    def test_warning_still_reports_items(self, item_data, payload_factory):
        response = FindItemsResponse.from_payload(payload_factory([item_data, item_data], ack="Warning"))
        output = format_results(response)
        assert "Found 2 items." in output
        assert output.count(SEPARATOR) == 2
