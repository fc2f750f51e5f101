from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv


@dataclass(frozen=True)
class Config:
    openai_api_key: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        openai_api_key = os.getenv("OPENAI_API_KEY")
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            openai_api_key=openai_api_key,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        openai_api_key: Optional[str],
        log_level: str,
    ) -> "Config":
        match openai_api_key:
            case None | "":
                raise ValueError("OPENAI_API_KEY must be set in .env")
            case key if not key.strip():
                raise ValueError("OPENAI_API_KEY must be set in .env")
            case _:
                pass

        return Config(
            openai_api_key=openai_api_key.strip(),
            log_level=log_level or "INFO",
        )
