"""
IndexNow API client library.

This library provides a client for notifying search engines that support
the IndexNow protocol about added, updated or deleted URLs.
"""

from .indexnow import DEFAULT_SEARCH_ENGINE, IndexNowClient, NotificationPayload
from .errors import ErrorKind, IndexNowError

__all__ = [
    "DEFAULT_SEARCH_ENGINE",
    "IndexNowClient",
    "NotificationPayload",
    "ErrorKind",
    "IndexNowError",
]
