"""Entry point — wires Config → OpenAITransport → WhisperTranscriptionClient."""
import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from rich.logging import RichHandler

from voicenote.audio import LocalAudioResource
from voicenote.config import Config
from voicenote.constants import (
    CLI_DESCRIPTION,
    CLI_HELP_DELETE,
    CLI_HELP_LANGUAGE,
    CLI_HELP_PATH,
    CLI_PROG,
    MSG_CLEANUP_FAILED,
)
from voicenote.errors import TranscriptionError, user_message
from voicenote.transcription.client import TranscriptionClient
from voicenote.transcription.whisper import WhisperTranscriptionClient
from voicenote.transport.openai import OpenAITransport

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=CLI_DESCRIPTION)
    parser.add_argument("path", help=CLI_HELP_PATH)
    parser.add_argument("--language", default=None, help=CLI_HELP_LANGUAGE)
    parser.add_argument(
        "--delete",
        action="store_true",
        help=CLI_HELP_DELETE,
    )
    return parser.parse_args(argv)


async def run(
    transcriber: TranscriptionClient,
    audio: LocalAudioResource,
    language: Optional[str] = None,
    delete: bool = False,
) -> int:
    try:
        text = await transcriber.transcribe(audio, language)
    except TranscriptionError as exc:
        print(user_message(exc), file=sys.stderr)
        return 1
    finally:
        if delete:
            try:
                audio.path.unlink(missing_ok=True)
            except OSError as exc:
                logger.warning(MSG_CLEANUP_FAILED, exc)
    print(text)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    transcriber = WhisperTranscriptionClient(OpenAITransport(config.openai_api_key))
    audio = LocalAudioResource(args.path)
    return asyncio.run(run(transcriber, audio, args.language, args.delete))


if __name__ == "__main__":
    sys.exit(main())
