"""Prompt assembly — pairs the fixed instruction text with a normalized image."""
from dataclasses import dataclass

from catalyzer.imaging import NormalizedImage


@dataclass(frozen=True)
class AnalysisRequest:
    prompt: str
    image: NormalizedImage

    @property
    def media_type(self) -> str:
        return self.image.media_type


def build_request(prompt: str, image: NormalizedImage) -> AnalysisRequest:
    return AnalysisRequest(prompt=prompt, image=image)
