"""
AI service interfaces - abstractions for AI operations.
Allows swapping between providers (GPT, Gemini, local models, etc.)
"""

from abc import ABC, abstractmethod
from core.domain.models import RumorAnalysis


class INewsClassifier(ABC):
    """Interface for news classification"""

    @abstractmethod
    async def analyze_rumor_credibility(
        self,
        title: str,
        description: str,
        source: str,
    ) -> RumorAnalysis:
        """Classify a news item as transfer rumor / regular news / not analyzed"""
        pass
