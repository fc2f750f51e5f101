"""Transport — abstract base for whatever actually sends the multipart request."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from voicenote.constants import AUDIO_CONTENT_TYPE, AUDIO_FILENAME, WHISPER_MODEL


@dataclass(frozen=True)
class TranscriptionRequest:
    audio: bytes
    language: Optional[str] = None
    model: str = WHISPER_MODEL
    filename: str = AUDIO_FILENAME
    content_type: str = AUDIO_CONTENT_TYPE


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        return next(
            (v for k, v in self.headers.items() if k.lower() == wanted),
            None,
        )


class TransportError(Exception):
    """Raised when no HTTP response was received at all."""


class Transport(ABC):
    @abstractmethod
    async def send(self, request: TranscriptionRequest) -> TransportResponse:
        """Send one request. Returns any HTTP response, raises TransportError otherwise."""
        ...
