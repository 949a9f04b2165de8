# Finding API settings - override any of these through the environment
import os

APP_ID_ENV = "EBAY_API_APP_ID"

FINDING_URL = os.getenv(
    "EBAY_FINDING_URL", "https://svcs.ebay.com/services/search/FindingService/v1"
)
GLOBAL_ID = os.getenv("EBAY_GLOBAL_ID", "EBAY-US")
SERVICE_VERSION = "1.13.0"
REQUEST_TIMEOUT = float(os.getenv("EBAY_REQUEST_TIMEOUT", 30))

DEFAULT_ITEMS_PER_PAGE = 10
MAX_ITEMS_PER_PAGE = 100  # service rejects entriesPerPage above this

LOG_LEVEL = os.getenv("FINDITEM_LOG_LEVEL", "WARNING")


def get_app_id():
    """eBay Application ID, or None when the variable is unset or blank"""
    value = os.getenv(APP_ID_ENV, "").strip()
    return value or None
