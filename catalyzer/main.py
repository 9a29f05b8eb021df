"""Entry point — wires Config → VisionClient → PazuzuDetector → FastAPI app."""
import logging
import sys
from pathlib import Path

import uvicorn
from rich.logging import RichHandler

from catalyzer.config import Config
from catalyzer.constants import (
    APP_VERSION,
    MSG_BANNER,
    MSG_STARTUP_FAILED,
    PROVIDER_CLAUDE,
    PROVIDER_OPENAI,
)
from catalyzer.detector import PazuzuDetector
from catalyzer.server import create_app
from catalyzer.vision.claude import ClaudeVisionClient
from catalyzer.vision.client import VisionClient
from catalyzer.vision.gemini import GeminiVisionClient
from catalyzer.vision.openai import OpenAIVisionClient

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_vision_client(config: Config) -> VisionClient:
    match config.vision_provider:
        case p if p == PROVIDER_CLAUDE:
            return ClaudeVisionClient(config.anthropic_api_key)
        case p if p == PROVIDER_OPENAI:
            return OpenAIVisionClient(config.openai_api_key)
        case _:
            return GeminiVisionClient(config.gemini_api_key, model=config.gemini_model)


def main() -> None:
    try:
        config = Config.from_env()
    except ValueError as exc:
        _setup_logging("INFO")
        logger.error(MSG_STARTUP_FAILED, exc)
        sys.exit(1)

    _setup_logging(config.log_level)

    vision = build_vision_client(config)
    detector = PazuzuDetector(vision)
    app = create_app(
        detector,
        static_dir=Path(config.static_dir),
        max_upload_bytes=config.max_upload_bytes,
    )

    logger.info(MSG_BANNER, APP_VERSION, config.port, vision.name)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
