"""
Error classification for remote NetBox failures.

Only a structured HTTP 404 counts as "object no longer exists". Everything
else (other status codes, transport errors, malformed responses) is OTHER.
Message text is never inspected.
"""

from enum import Enum

from ipsync.sync.errors import NetBoxAPIError

NOT_FOUND_STATUS = 404


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    OTHER = "other"


def classify(err: BaseException) -> ErrorKind:
    """Classify a failed remote call."""
    if isinstance(err, NetBoxAPIError) and err.status_code == NOT_FOUND_STATUS:
        return ErrorKind.NOT_FOUND
    return ErrorKind.OTHER


def is_not_found(err: BaseException) -> bool:
    return classify(err) is ErrorKind.NOT_FOUND
