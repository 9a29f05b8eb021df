"""GeminiVisionClient — Google Gemini vision backend (default)."""
import google.generativeai as genai

from catalyzer.constants import GEMINI_VISION_MODEL
from catalyzer.prompt import AnalysisRequest
from catalyzer.vision.client import VisionClient


class GeminiVisionClient(VisionClient):
    name = "Gemini"

    def __init__(self, api_key: str, model: str = GEMINI_VISION_MODEL) -> None:
        genai.configure(api_key=api_key)
        self._model = genai.GenerativeModel(model)

    async def analyze(self, request: AnalysisRequest) -> str:
        # The SDK base64-encodes inline blob data on the wire.
        response = await self._model.generate_content_async(
            [
                request.prompt,
                {"mime_type": request.media_type, "data": request.image.data},
            ]
        )
        return response.text.strip()
