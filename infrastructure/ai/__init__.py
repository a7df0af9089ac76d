from infrastructure.ai.openai_service import OpenAINewsClassifier

__all__ = [
    "OpenAINewsClassifier",
]
