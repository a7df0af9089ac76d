from core.interfaces.repositories import (
    IStandingsCacheRepository,
    INewsRepository,
)
from core.interfaces.ai import INewsClassifier
from core.interfaces.providers import IStandingsProvider, IRumorFetcher

__all__ = [
    # Repositories
    "IStandingsCacheRepository",
    "INewsRepository",
    # AI
    "INewsClassifier",
    # Providers
    "IStandingsProvider",
    "IRumorFetcher",
]
