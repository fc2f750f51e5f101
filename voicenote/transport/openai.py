"""OpenAITransport — sends transcription requests through the OpenAI SDK."""
import logging

from openai import APIConnectionError, APIError, APIStatusError, AsyncOpenAI

from voicenote.constants import MSG_POST, OPENAI_BASE_URL, REQUEST_TIMEOUT, TRANSCRIPTION_URL
from voicenote.transport.client import (
    TranscriptionRequest,
    Transport,
    TransportError,
    TransportResponse,
)

logger = logging.getLogger(__name__)


def _error_body(exc: APIStatusError) -> object:
    # The SDK unwraps the "error" envelope; put it back so callers see the wire shape.
    match exc.body:
        case dict() as inner if "error" not in inner:
            return {"error": inner}
        case body:
            return body


class OpenAITransport(Transport):
    """Multipart POST to the Whisper endpoint with SDK retries disabled.

    Retrying is the caller's policy, so the client is built with
    ``max_retries=0`` and every HTTP status comes back as a response.
    """

    def __init__(self, api_key: str, timeout: float = REQUEST_TIMEOUT) -> None:
        self._api_key = api_key
        self._timeout = timeout

    async def send(self, request: TranscriptionRequest) -> TransportResponse:
        extra = {"language": request.language} if request.language else {}
        logger.debug(MSG_POST, TRANSCRIPTION_URL, request.model, request.language)
        async with AsyncOpenAI(
            api_key=self._api_key,
            base_url=OPENAI_BASE_URL,
            timeout=self._timeout,
            max_retries=0,
        ) as client:
            try:
                response = await client.audio.transcriptions.create(
                    model=request.model,
                    file=(request.filename, request.audio, request.content_type),
                    **extra,
                )
            except APIStatusError as exc:
                return TransportResponse(
                    status_code=exc.status_code,
                    headers=dict(exc.response.headers),
                    body=_error_body(exc),
                )
            except APIConnectionError as exc:
                raise TransportError(str(exc)) from exc
            except APIError as exc:
                # e.g. APIResponseValidationError on a malformed 2xx body.
                match getattr(exc, "response", None):
                    case None:
                        raise TransportError(str(exc)) from exc
                    case http:
                        return TransportResponse(
                            status_code=http.status_code,
                            headers=dict(http.headers),
                            body={"error": {"message": exc.message}},
                        )
        return TransportResponse(status_code=200, body={"text": response.text})
