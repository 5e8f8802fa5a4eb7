"""
HTTP transport for IndexNow submissions.
"""

import asyncio
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import aiohttp

from .errors import IndexNowError

logger = logging.getLogger(__name__)

DEFAULT_HOST_HEADER = "api.indexnow.org"
USER_AGENT = "indexnow-python/0.1.0"


def host_header(url: str) -> Optional[str]:
    """Get the ``Host`` header value for a request target.

    Returns None when the URL carries no host.
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        port = parts.port
    except ValueError:
        return None
    if not hostname:
        return None
    if ":" in hostname:
        hostname = f"[{hostname}]"
    if port is not None:
        return f"{hostname}:{port}"
    return hostname


def _request_headers(url: str) -> Dict[str, str]:
    headers = {
        "User-Agent": USER_AGENT,
        "Content-Type": "application/json; charset=utf-8",
    }
    host = host_header(url)
    if host:
        headers["Host"] = host
    return headers


async def _send(session: aiohttp.ClientSession, url: str, payload: Dict[str, Any]) -> None:
    async with session.post(url, json=payload, headers=_request_headers(url)) as response:
        if response.status == 200:
            return
        body = await response.text(errors="replace")
        logger.warning(f"IndexNow returned HTTP {response.status} for {url}")
        raise IndexNowError.status_error(response.status, body)


async def post(
    url: str,
    payload: Dict[str, Any],
    session: Optional[aiohttp.ClientSession] = None,
) -> None:
    """POST a JSON payload to an IndexNow endpoint.

    Args:
        url: Full endpoint URL, e.g. ``https://api.indexnow.org/IndexNow``
        payload: JSON-serializable request body
        session: Session to send through; a throwaway one is used if omitted

    Raises:
        IndexNowError: ``CONNECTION`` kind if no response was obtained,
            ``STATUS`` kind if the response code was not 200
    """
    logger.debug(f"POST {url}")

    try:
        if session is not None:
            await _send(session, url, payload)
        else:
            async with aiohttp.ClientSession() as own_session:
                await _send(own_session, url, payload)

    except IndexNowError:
        raise
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise IndexNowError.connection(str(e) or e.__class__.__name__, cause=e) from e
