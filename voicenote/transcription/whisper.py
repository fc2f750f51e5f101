"""WhisperTranscriptionClient — OpenAI Whisper speech-to-text with bounded retries."""
import asyncio
import json
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from tenacity import AsyncRetrying, RetryCallState, retry_if_result, stop_after_attempt

from voicenote.audio import AudioResource, format_size
from voicenote.constants import (
    ERR_MAX_ATTEMPTS,
    MAX_ATTEMPTS,
    MSG_API_ERROR_DETAILS,
    MSG_ATTEMPT,
    MSG_ATTEMPT_FAILED,
    MSG_ATTEMPT_OK,
    MSG_FINAL_FAILURE,
    MSG_NETWORK,
    MSG_RETRYING,
    MSG_UNKNOWN_FAILURE,
)
from voicenote.errors import RateLimited, ResourceNotFound, TranscriptionError, UnknownError
from voicenote.transcription.backoff import compute_delay
from voicenote.transcription.client import TranscriptionClient
from voicenote.transcription.outcome import (
    AttemptOutcome,
    FatalFailure,
    RetryableFailure,
    Success,
    classify_response,
    classify_transport_error,
)
from voicenote.transport.client import TranscriptionRequest, Transport, TransportError

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class AttemptState(Enum):
    IDLE = "idle"
    ATTEMPTING = "attempting"
    RETRYING = "retrying"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class RetryState:
    """Per-call bookkeeping; never shared between transcribe() calls."""

    state: AttemptState = AttemptState.IDLE
    attempt: int = 0
    last_error: Optional[TranscriptionError] = None
    last_retry_after: Optional[int] = None

    def record(self, error: TranscriptionError, retry_after: Optional[int] = None) -> None:
        self.last_error = error
        match (error, retry_after):
            case (RateLimited(), int() as hint):
                self.last_retry_after = hint
            case _:
                pass


def final_error(retry: RetryState) -> TranscriptionError:
    """The error surfaced to the caller once the loop has stopped."""
    match retry.last_error:
        case None:
            logger.error(MSG_UNKNOWN_FAILURE)
            return UnknownError()
        case RateLimited() if retry.last_retry_after is not None:
            return RateLimited(retry.last_retry_after)
        case error:
            return error


def _is_retryable(outcome: AttemptOutcome) -> bool:
    return isinstance(outcome, RetryableFailure)


def _last_outcome(call: RetryCallState) -> Optional[AttemptOutcome]:
    return call.outcome.result() if call.outcome is not None else None


class WhisperTranscriptionClient(TranscriptionClient):
    """Uploads a clip and returns its transcript, retrying 429/503/network failures.

    Attempts are strictly sequential. The resource is re-checked before each
    attempt and is never modified; cleaning it up is the caller's job.
    ``sleep`` and ``rng`` exist so tests can run the loop without waiting.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        max_attempts: int = MAX_ATTEMPTS,
        sleep: Sleep = asyncio.sleep,
        rng: Callable[[], float] = random.random,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(ERR_MAX_ATTEMPTS)
        self._transport = transport
        self._max_attempts = max_attempts
        self._sleep = sleep
        self._rng = rng

    async def transcribe(self, audio: AudioResource, language: Optional[str] = None) -> str:
        retry = RetryState()

        def before(call: RetryCallState) -> None:
            retry.state = AttemptState.ATTEMPTING
            retry.attempt = call.attempt_number

        def after(call: RetryCallState) -> None:
            match _last_outcome(call):
                case RetryableFailure(error=error, retry_after=hint):
                    retry.record(error, hint)
                case _:
                    pass

        def before_sleep(call: RetryCallState) -> None:
            retry.state = AttemptState.RETRYING
            logger.info(MSG_RETRYING, call.next_action.sleep, retry.last_error.code)

        def wait(call: RetryCallState) -> float:
            # Only consulted after a RetryableFailure.
            return compute_delay(call.attempt_number, _last_outcome(call).retry_after, self._rng)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait,
            retry=retry_if_result(_is_retryable),
            sleep=self._sleep,
            before=before,
            after=after,
            before_sleep=before_sleep,
            retry_error_callback=_last_outcome,
        )
        outcome = await retrying(self._attempt, audio, language, retry)

        match outcome:
            case Success(transcript=text):
                retry.state = AttemptState.SUCCESS
                logger.info(MSG_ATTEMPT_OK, retry.attempt)
                return text
            case RetryableFailure(error=error, retry_after=hint):
                retry.record(error, hint)
            case FatalFailure(error=error):
                retry.record(error)
            case _:
                pass

        retry.state = AttemptState.FAILED
        error = final_error(retry)
        logger.error(MSG_FINAL_FAILURE, error.code, error.message)
        raise error

    async def _attempt(
        self, audio: AudioResource, language: Optional[str], retry: RetryState
    ) -> AttemptOutcome:
        # The caller may delete the clip between attempts (cleanup timers etc.).
        if not audio.exists():
            return FatalFailure(ResourceNotFound(audio.name))

        logger.info(MSG_ATTEMPT, retry.attempt, self._max_attempts, format_size(audio.size()))
        try:
            data = audio.read()
        except OSError as exc:
            return FatalFailure(ResourceNotFound(audio.name, cause=exc))

        request = TranscriptionRequest(audio=data, language=language)
        try:
            response = await self._transport.send(request)
        except TransportError as exc:
            logger.warning(MSG_ATTEMPT_FAILED, retry.attempt, MSG_NETWORK)
            return classify_transport_error(exc)

        if not response.ok:
            logger.warning(MSG_ATTEMPT_FAILED, retry.attempt, response.status_code)
            if response.body is not None:
                logger.warning(MSG_API_ERROR_DETAILS, json.dumps(response.body, default=str))
        return classify_response(response)
