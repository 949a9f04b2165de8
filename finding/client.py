"""
Finding API client

Sends one findItemsByKeywords call over HTTP and validates the JSON answer.
The Application ID travels in the client headers, never in the query string.
"""

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from . import config
from .errors import ServiceError
from .models import FindItemsResponse, SearchRequest

log = logging.getLogger(__name__)

OPERATION_NAME = "findItemsByKeywords"


def redact(value: str, keep_start: int = 6, keep_end: int = 4) -> str:
    if len(value) <= keep_start + keep_end:
        return "***"
    return f"{value[:keep_start]}...{value[-keep_end:]}"


class FindingClient:
    """Client for the eBay Finding service"""

    def __init__(
        self,
        app_id: str,
        url: str = config.FINDING_URL,
        global_id: str = config.GLOBAL_ID,
        timeout: float = config.REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.app_id = app_id
        self.url = url
        self.global_id = global_id
        self.timeout = timeout
        self.transport = transport

    @property
    def headers(self) -> dict:
        return {
            'X-EBAY-SOA-SECURITY-APPNAME': self.app_id,
            'X-EBAY-SOA-OPERATION-NAME': OPERATION_NAME,
            'X-EBAY-SOA-SERVICE-VERSION': config.SERVICE_VERSION,
            'X-EBAY-SOA-GLOBAL-ID': self.global_id,
            'X-EBAY-SOA-RESPONSE-DATA-FORMAT': 'JSON',
        }

    async def find_items_by_keywords(self, request: SearchRequest) -> FindItemsResponse:
        """Run the search; raises ServiceError on any transport or service problem"""
        params = request.to_params()
        log.debug("GET %s app_id=%s params=%s", self.url, redact(self.app_id), params)

        async with httpx.AsyncClient(
            headers=self.headers, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.get(self.url, params=params)
            except httpx.HTTPError as e:
                raise ServiceError(f"Finding API request failed: {e}") from e

        if response.is_error:
            raise ServiceError(
                f"Finding API returned HTTP {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            result = FindItemsResponse.from_payload(response.json())
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            raise ServiceError(f"Unexpected Finding API response: {e}") from e

        log.debug("ack=%s count=%s", result.ack, result.count)
        for error in result.errors:
            log.debug("%s %s: %s", error.severity, error.error_id, error.message)
        return result


def _error_detail(response: httpx.Response) -> str:
    """Pull the service's own error text out of an error response, if any"""
    try:
        result = FindItemsResponse.from_payload(response.json())
    except (ValueError, KeyError, TypeError, ValidationError):
        return response.text[:300] or response.reason_phrase
    messages = [e.message for e in result.errors if e.message]
    return "; ".join(messages) or response.reason_phrase


def find_items_sync(app_id: str, request: SearchRequest, **client_options) -> FindItemsResponse:
    """Synchronous search for CLI usage"""
    client = FindingClient(app_id, **client_options)
    return asyncio.run(client.find_items_by_keywords(request))
