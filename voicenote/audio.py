"""AudioResource — read-only handle on a recorded clip owned by the caller."""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from voicenote.constants import SIZE_UNKNOWN

logger = logging.getLogger(__name__)


class AudioResource(ABC):
    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def exists(self) -> bool: ...

    @abstractmethod
    def size(self) -> Optional[int]:
        """Size in bytes, or None when it cannot be determined."""
        ...

    @abstractmethod
    def read(self) -> bytes: ...


class LocalAudioResource(AudioResource):

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        return str(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def size(self) -> Optional[int]:
        try:
            return self._path.stat().st_size
        except OSError as exc:
            logger.debug("Could not stat %s: %s", self._path, exc)
            return None

    def read(self) -> bytes:
        return self._path.read_bytes()


def format_size(size: Optional[int]) -> str:
    match size:
        case int() as n if n > 0:
            return f"{round(n / 1024)} KB"
        case _:
            return SIZE_UNKNOWN
