"""Attempt outcomes and the single place where raw transport results are classified."""
from dataclasses import dataclass
from typing import Optional, Union

from voicenote.constants import (
    ERR_API_STATUS,
    ERR_NO_TEXT,
    HEADER_RETRY_AFTER,
    RETRYABLE_STATUSES,
    STATUS_PAYLOAD_TOO_LARGE,
    STATUS_RATE_LIMITED,
)
from voicenote.errors import (
    ApiError,
    NetworkError,
    PayloadTooLarge,
    RateLimited,
    TranscriptionError,
)
from voicenote.transcription.backoff import parse_retry_after
from voicenote.transport.client import TransportError, TransportResponse


@dataclass(frozen=True)
class Success:
    transcript: str


@dataclass(frozen=True)
class RetryableFailure:
    error: TranscriptionError
    retry_after: Optional[int] = None


@dataclass(frozen=True)
class FatalFailure:
    error: TranscriptionError


AttemptOutcome = Union[Success, RetryableFailure, FatalFailure]


def error_message(body: object, status: int) -> str:
    """``error.message`` from a structured error body, else a generic message."""
    match body:
        case {"error": {"message": str() as message}} if message.strip():
            return message
        case _:
            return ERR_API_STATUS % status


def classify_response(response: TransportResponse) -> AttemptOutcome:
    status = response.status_code
    match status:
        case _ if response.ok:
            match response.body:
                case {"text": str() as text}:
                    return Success(text)
                case _:
                    return FatalFailure(ApiError(ERR_NO_TEXT, status))
        case s if s == STATUS_RATE_LIMITED:
            hint = parse_retry_after(response.header(HEADER_RETRY_AFTER))
            return RetryableFailure(RateLimited() if hint is None else RateLimited(hint), hint)
        case s if s in RETRYABLE_STATUSES:
            hint = parse_retry_after(response.header(HEADER_RETRY_AFTER))
            return RetryableFailure(ApiError(error_message(response.body, s), s), hint)
        case s if s == STATUS_PAYLOAD_TOO_LARGE:
            return FatalFailure(PayloadTooLarge())
        case s:
            return FatalFailure(ApiError(error_message(response.body, s), s))


def classify_transport_error(exc: TransportError) -> AttemptOutcome:
    return RetryableFailure(NetworkError(exc))
