"""
Error types for the IndexNow library.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure kinds reported by the IndexNow client."""

    CONNECTION = "connection"
    STATUS = "status"


class IndexNowError(Exception):
    """Failure to deliver an IndexNow notification.

    ``kind`` tells the two failure classes apart: ``CONNECTION`` when no
    response was obtained, ``STATUS`` when the search engine answered with
    anything other than HTTP 200. For status errors the message is the
    response body text and ``status`` holds the code.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.CONNECTION,
        status: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status = status
        self.cause = cause

    @classmethod
    def connection(cls, message: str, cause: Optional[Exception] = None) -> "IndexNowError":
        return cls(message, ErrorKind.CONNECTION, cause=cause)

    @classmethod
    def status_error(cls, status: int, message: str) -> "IndexNowError":
        return cls(message, ErrorKind.STATUS, status=status)

    @property
    def is_connection(self) -> bool:
        return self.kind is ErrorKind.CONNECTION

    @property
    def is_status(self) -> bool:
        return self.kind is ErrorKind.STATUS

    def __str__(self) -> str:
        if not self.message and self.status is not None:
            return f"IndexNow API returned status code: {self.status}"
        return self.message

    def __repr__(self) -> str:
        if self.status is not None:
            return f"IndexNowError({self.kind.value}, {self.status}, {self.message!r})"
        return f"IndexNowError({self.kind.value}, {self.message!r})"
