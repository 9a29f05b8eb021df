from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from catalyzer.constants import (
    BYTES_PER_MB,
    DEFAULT_HOST,
    DEFAULT_MAX_UPLOAD_MB,
    DEFAULT_PORT,
    DEFAULT_STATIC_DIR,
    DEFAULT_VISION_PROVIDER,
    GEMINI_VISION_MODEL,
    PROVIDER_CLAUDE,
    PROVIDER_GEMINI,
    PROVIDER_OPENAI,
)


@dataclass(frozen=True)
class Config:
    port: int
    host: str
    log_level: str
    vision_provider: str
    gemini_api_key: Optional[str]
    gemini_model: str
    anthropic_api_key: Optional[str]
    openai_api_key: Optional[str]
    max_upload_mb: int
    static_dir: str

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * BYTES_PER_MB

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        port = os.getenv("PORT", str(DEFAULT_PORT))
        host = os.getenv("HOST", DEFAULT_HOST)
        log_level = os.getenv("LOG_LEVEL", "INFO")
        provider = os.getenv("VISION_PROVIDER", DEFAULT_VISION_PROVIDER)
        gemini_api_key = os.getenv("GEMINI_API_KEY") or None
        gemini_model = os.getenv("GEMINI_MODEL") or GEMINI_VISION_MODEL
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        max_upload_mb = os.getenv("MAX_UPLOAD_MB", str(DEFAULT_MAX_UPLOAD_MB))
        static_dir = os.getenv("STATIC_DIR") or DEFAULT_STATIC_DIR

        return cls._validate(
            port=int(port),
            host=host,
            log_level=log_level,
            vision_provider=provider.strip().lower(),
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            max_upload_mb=int(max_upload_mb),
            static_dir=static_dir,
        )

    @staticmethod
    def _validate(
        port: int,
        host: str,
        log_level: str,
        vision_provider: str,
        gemini_api_key: Optional[str],
        gemini_model: str,
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
        max_upload_mb: int,
        static_dir: str,
    ) -> "Config":
        match (vision_provider, gemini_api_key, anthropic_api_key, openai_api_key):
            case (str() as p, None, _, _) if p == PROVIDER_GEMINI:
                raise ValueError("GEMINI_API_KEY environment variable is required")
            case (str() as p, _, None, _) if p == PROVIDER_CLAUDE:
                raise ValueError("ANTHROPIC_API_KEY environment variable is required")
            case (str() as p, _, _, None) if p == PROVIDER_OPENAI:
                raise ValueError("OPENAI_API_KEY environment variable is required")
            case (str() as p, _, _, _) if p not in (PROVIDER_GEMINI, PROVIDER_CLAUDE, PROVIDER_OPENAI):
                raise ValueError(f"VISION_PROVIDER must be one of gemini, claude, openai (got {p!r})")
            case _:
                pass

        match max_upload_mb:
            case int() as mb if mb > 0:
                pass
            case _:
                raise ValueError("MAX_UPLOAD_MB must be a positive integer")

        return Config(
            port=port,
            host=host,
            log_level=log_level,
            vision_provider=vision_provider,
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            max_upload_mb=max_upload_mb,
            static_dir=static_dir,
        )
