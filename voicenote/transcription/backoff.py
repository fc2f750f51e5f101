"""Retry delay computation — pure functions, no sleeping here."""
import random
from typing import Callable, Optional

from voicenote.constants import BACKOFF_BASE_SECONDS, BACKOFF_JITTER


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Integer seconds from a ``retry-after`` header value, or None when unusable."""
    match value:
        case str() as raw:
            try:
                seconds = int(raw.strip())
            except ValueError:
                return None
            return seconds if seconds >= 0 else None
        case _:
            return None


def compute_delay(
    attempt: int,
    retry_after: Optional[int] = None,
    rng: Callable[[], float] = random.random,
) -> float:
    """Seconds to wait after ``attempt`` (1-based) failed.

    The server hint wins when present; otherwise the delay doubles per
    attempt (2s, 4s, 8s). Either way a symmetric jitter of up to
    ±BACKOFF_JITTER is applied. ``rng`` must return values in [0, 1);
    ``lambda: 0.5`` yields the un-jittered delay.
    """
    base = (
        float(retry_after)
        if retry_after is not None
        else BACKOFF_BASE_SECONDS * (2 ** attempt)
    )
    jitter = base * (rng() * 2 * BACKOFF_JITTER - BACKOFF_JITTER)
    return max(0.0, base + jitter)
