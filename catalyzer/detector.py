"""PazuzuDetector — normalize → prompt → model → parse, one upload at a time."""
import asyncio
import logging

from catalyzer.analysis import AnalysisOutcome, AnalysisResult, CatAnalysis, ParseFailure, parse_analysis
from catalyzer.constants import (
    MSG_MODEL_REPLY,
    MSG_PARSE_ERROR_LOG,
    MSG_RECEIVED_IMAGE,
    MSG_RESIZED_IMAGE,
    MSG_VERDICT,
    MSG_VERDICT_CALM,
    MSG_VERDICT_NOT_CAT,
    MSG_VERDICT_PAZUZU,
    PAZUZU_PROMPT,
)
from catalyzer.imaging import UploadedImage, normalize_image
from catalyzer.prompt import build_request
from catalyzer.vision.client import VisionClient

logger = logging.getLogger(__name__)


def _verdict(outcome: AnalysisResult) -> str:
    match outcome:
        case CatAnalysis(is_pazuzu=True):
            return MSG_VERDICT_PAZUZU
        case CatAnalysis():
            return MSG_VERDICT_CALM
        case _:
            return MSG_VERDICT_NOT_CAT


class PazuzuDetector:
    """Holds the vision backend and the instruction text for the request handler.

    Built once at startup and passed to the app factory; it carries no
    per-request state.
    """

    def __init__(self, vision_client: VisionClient, prompt: str = PAZUZU_PROMPT) -> None:
        self._vision_client = vision_client
        self._prompt = prompt

    @property
    def vision_client(self) -> VisionClient:
        return self._vision_client

    async def detect(self, upload: UploadedImage) -> AnalysisOutcome:
        """Run the pipeline. Image and transport errors propagate to the caller."""
        logger.info(MSG_RECEIVED_IMAGE, upload.filename, upload.size / 1024)

        image = await asyncio.to_thread(normalize_image, upload.data)
        logger.info(MSG_RESIZED_IMAGE, image.size / 1024, image.width, image.height)

        text = await self._vision_client.analyze(build_request(self._prompt, image))
        logger.info(MSG_MODEL_REPLY, self._vision_client.name, text)

        outcome = parse_analysis(text)
        match outcome:
            case ParseFailure(reason=reason):
                logger.error(MSG_PARSE_ERROR_LOG, self._vision_client.name, reason)
            case result:
                logger.info(MSG_VERDICT, _verdict(result))
        return outcome
