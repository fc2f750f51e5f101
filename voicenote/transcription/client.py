"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from typing import Optional

from voicenote.audio import AudioResource


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(self, audio: AudioResource, language: Optional[str] = None) -> str:
        """Convert a recorded clip to text. Raises TranscriptionError on failure."""
        ...
