"""OpenAIVisionClient — OpenAI GPT-4o vision backend."""
from openai import AsyncOpenAI

from catalyzer.constants import OPENAI_VISION_MODEL
from catalyzer.prompt import AnalysisRequest
from catalyzer.vision.client import VisionClient


class OpenAIVisionClient(VisionClient):
    name = "OpenAI"

    def __init__(self, api_key: str, model: str = OPENAI_VISION_MODEL) -> None:
        self._api_key = api_key
        self._model = model

    async def analyze(self, request: AnalysisRequest) -> str:
        client = AsyncOpenAI(api_key=self._api_key)
        data_url = f"data:{request.media_type};base64,{request.image.b64}"
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": request.prompt},
                        {"type": "image_url", "image_url": {"url": data_url}},
                    ],
                }
            ],
        )
        content = response.choices[0].message.content
        return content.strip() if content else ""
