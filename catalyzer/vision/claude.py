"""ClaudeVisionClient — Anthropic Claude vision backend."""
from anthropic import AsyncAnthropic

from catalyzer.constants import CLAUDE_VISION_MODEL, VISION_MAX_TOKENS
from catalyzer.prompt import AnalysisRequest
from catalyzer.vision.client import VisionClient


class ClaudeVisionClient(VisionClient):
    name = "Claude"

    def __init__(self, api_key: str, model: str = CLAUDE_VISION_MODEL) -> None:
        self._api_key = api_key
        self._model = model

    async def analyze(self, request: AnalysisRequest) -> str:
        client = AsyncAnthropic(api_key=self._api_key)
        message = await client.messages.create(
            model=self._model,
            max_tokens=VISION_MAX_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": request.media_type,
                                "data": request.image.b64,
                            },
                        },
                        {"type": "text", "text": request.prompt},
                    ],
                }
            ],
        )
        return message.content[0].text.strip()
