"""
IndexNow API client for notifying search engines about changed URLs.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import aiohttp

from . import http

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_ENGINE = "https://api.indexnow.org"


@dataclass
class NotificationPayload:
    """Request body of an IndexNow submission."""

    url_list: List[str]
    host: str
    key: str
    key_location: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Get the wire representation (camelCase, no null keyLocation)."""
        data: Dict[str, Any] = {
            "urlList": list(self.url_list),
            "host": self.host,
            "key": self.key,
        }
        if self.key_location is not None:
            data["keyLocation"] = self.key_location
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NotificationPayload":
        return cls(
            url_list=[str(url) for url in data.get("urlList", [])],
            host=data["host"],
            key=data["key"],
            key_location=data.get("keyLocation"),
        )


class IndexNowClient:
    """Client for the IndexNow API."""

    def __init__(
        self,
        host: Any,
        key: Any,
        search_engine: str = DEFAULT_SEARCH_ENGINE,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        """Initialize the IndexNow client.

        Args:
            host: Host of the site whose URLs are submitted
            key: IndexNow key published on that host
            search_engine: Base URL of the search engine endpoint
            session: Optional aiohttp session; the client never closes it
        """
        self.search_engine = str(search_engine)
        self.host = str(host)
        self.key = str(key)
        self.key_location: Optional[str] = None
        self._session = session
        self._owned_session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "IndexNowClient":
        """Async context manager entry."""
        if self._session is None and (self._owned_session is None or self._owned_session.closed):
            self._owned_session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session opened by the context manager, if any."""
        if self._owned_session and not self._owned_session.closed:
            await self._owned_session.close()
        self._owned_session = None

    def set_search_engine(self, search_engine: Any) -> None:
        self.search_engine = str(search_engine)

    def set_key_location(self, key_location: Any) -> None:
        self.key_location = str(key_location)

    @property
    def endpoint(self) -> str:
        return f"{self.search_engine}/IndexNow"

    def build_payload(self, urls: Iterable[Any]) -> NotificationPayload:
        """Build the submission body for ``urls`` from the current settings."""
        return NotificationPayload(
            url_list=[str(url) for url in urls],
            host=self.host,
            key=self.key,
            key_location=self.key_location,
        )

    async def notify(self, urls: Iterable[Any]) -> None:
        """Tell the search engine that ``urls`` have changed.

        Args:
            urls: URLs to submit; each is converted with ``str()``

        Raises:
            IndexNowError: If the submission fails or is rejected
        """
        endpoint = self.endpoint
        payload = self.build_payload(urls)
        session = self._session or self._owned_session

        logger.debug(f"Submitting {len(payload.url_list)} URLs for {payload.host} to {endpoint}")
        await http.post(endpoint, payload.to_dict(), session=session)
        logger.info(f"IndexNow accepted {len(payload.url_list)} URLs at {endpoint}")

    send_urls = notify
