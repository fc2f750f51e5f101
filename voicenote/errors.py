"""Transcription error taxonomy.

Every failure of ``TranscriptionClient.transcribe`` surfaces as exactly one
of these classes, each carrying a stable ``code`` plus the structured detail
(status code, retry hint, cause) a caller needs to render a precise message.
"""
from typing import Optional

from voicenote.constants import (
    CODE_API_ERROR,
    CODE_FILE_NOT_FOUND,
    CODE_FILE_TOO_LARGE,
    CODE_NETWORK_ERROR,
    CODE_RATE_LIMIT,
    CODE_UNKNOWN_ERROR,
    DEFAULT_RETRY_AFTER_SECONDS,
    ERR_FILE_NOT_FOUND,
    ERR_FILE_TOO_LARGE,
    ERR_FILE_UNREADABLE,
    ERR_NETWORK,
    ERR_RATE_LIMIT,
    ERR_UNKNOWN,
    MSG_USER_API_ERROR,
    MSG_USER_FILE_NOT_FOUND,
    MSG_USER_FILE_TOO_LARGE,
    MSG_USER_NETWORK,
    MSG_USER_RATE_LIMIT,
    MSG_USER_UNKNOWN,
    STATUS_PAYLOAD_TOO_LARGE,
    STATUS_RATE_LIMITED,
)


class TranscriptionError(Exception):
    """Base class for every classified transcription failure."""

    code = CODE_UNKNOWN_ERROR
    status_code: Optional[int] = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFound(TranscriptionError):
    code = CODE_FILE_NOT_FOUND

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        match cause:
            case None:
                super().__init__(ERR_FILE_NOT_FOUND % path)
            case exc:
                super().__init__(ERR_FILE_UNREADABLE % (path, exc))
        self.path = path
        self.cause = cause
        self.__cause__ = cause


class RateLimited(TranscriptionError):
    code = CODE_RATE_LIMIT
    status_code = STATUS_RATE_LIMITED

    def __init__(self, retry_after: int = DEFAULT_RETRY_AFTER_SECONDS) -> None:
        super().__init__(ERR_RATE_LIMIT % retry_after)
        self.retry_after = retry_after


class PayloadTooLarge(TranscriptionError):
    code = CODE_FILE_TOO_LARGE
    status_code = STATUS_PAYLOAD_TOO_LARGE

    def __init__(self) -> None:
        super().__init__(ERR_FILE_TOO_LARGE)


class ApiError(TranscriptionError):
    code = CODE_API_ERROR

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(TranscriptionError):
    code = CODE_NETWORK_ERROR

    def __init__(self, cause: BaseException) -> None:
        super().__init__(ERR_NETWORK % cause)
        self.cause = cause
        self.__cause__ = cause


class UnknownError(TranscriptionError):
    code = CODE_UNKNOWN_ERROR

    def __init__(self) -> None:
        super().__init__(ERR_UNKNOWN)


def user_message(error: TranscriptionError) -> str:
    """Render a kind-specific message suitable for showing to the user."""
    match error:
        case ResourceNotFound():
            return MSG_USER_FILE_NOT_FOUND
        case RateLimited(retry_after=seconds):
            return MSG_USER_RATE_LIMIT % seconds
        case PayloadTooLarge():
            return MSG_USER_FILE_TOO_LARGE
        case ApiError(status_code=status, message=message):
            return MSG_USER_API_ERROR % (status, message)
        case NetworkError():
            return MSG_USER_NETWORK
        case _:
            return MSG_USER_UNKNOWN
