"""VisionClient — abstract base for the cat-judging model backends."""
from abc import ABC, abstractmethod

from catalyzer.prompt import AnalysisRequest


class VisionClient(ABC):
    name: str = "Vision"

    @abstractmethod
    async def analyze(self, request: AnalysisRequest) -> str:
        """Send prompt + image to the model and return its raw text reply. Raises on failure."""
        ...
