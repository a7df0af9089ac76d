"""
Domain models - the core of business logic.
These models are transport-agnostic (HTTP route, cron script, tests).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime, timedelta, timezone
from enum import Enum

from dateutil import parser as dtparser


# === ENUMS ===

class ClassificationKind(str, Enum):
    TRANSFER_RUMOR = "transfer_rumor"
    REGULAR_NEWS = "regular_news"
    UNANALYZED = "unanalyzed"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TransferDirection(str, Enum):
    IN = "in"        # player arriving
    OUT = "out"      # player leaving
    UNKNOWN = "unknown"


class PlayerRole(str, Enum):
    TARGET = "target"
    DEPARTING = "departing"
    MENTIONED = "mentioned"


class FeedType(str, Enum):
    RSS = "rss"
    TELEGRAM = "telegram"


# === STANDINGS ===

class StandingEntry(BaseModel):
    """One row of a league table, as Football-Data.org names it"""
    model_config = ConfigDict(extra="allow")

    position: int
    team: Dict[str, Any]
    playedGames: Optional[int] = None
    form: Optional[str] = None
    won: Optional[int] = None
    draw: Optional[int] = None
    lost: Optional[int] = None
    points: Optional[int] = None
    goalsFor: Optional[int] = None
    goalsAgainst: Optional[int] = None
    goalDifference: Optional[int] = None


class Standing(BaseModel):
    """A full league table (stage/type/group)"""
    model_config = ConfigDict(extra="allow")

    stage: Optional[str] = None
    type: str
    group: Optional[str] = None
    table: List[StandingEntry] = Field(default_factory=list)


class CachedStandings(BaseModel):
    """Row of the standings cache table; last_updated is kept exactly as stored"""
    data: Any
    last_updated: str

    @field_validator("last_updated", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> Any:
        return v.isoformat() if isinstance(v, datetime) else v

    @property
    def updated_at(self) -> datetime:
        parsed = dtparser.isoparse(self.last_updated)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    def age(self, now: datetime) -> timedelta:
        return now - self.updated_at

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        return self.age(now) < ttl


# === NEWS ===

class FeedConfig(BaseModel):
    url: str
    source: str
    type: FeedType = FeedType.RSS


class RumorItem(BaseModel):
    """Item pulled from a feed, before dedupe/classification"""
    title: str
    link: str
    pub_date: datetime
    source: str
    description: Optional[str] = None


class DuplicateCheck(BaseModel):
    content_hash: str
    is_duplicate: bool = False
    duplicate_of_id: Optional[Any] = None
    similarity_score: Optional[float] = None


class ExtractedPlayer(BaseModel):
    name: str
    role: PlayerRole = PlayerRole.MENTIONED


class RumorAnalysis(BaseModel):
    """AI classification of a news item"""
    kind: ClassificationKind
    probability: Optional[float] = Field(default=None, ge=0, le=100)
    reasoning: str = ""
    confidence: Confidence = Confidence.LOW
    transfer_direction: Optional[TransferDirection] = None
    players: List[ExtractedPlayer] = Field(default_factory=list)
    unanalyzed_reason: Optional[str] = None  # 'quota' / 'invalid_response'

    @classmethod
    def unanalyzed(cls, reason: str, reasoning: str) -> "RumorAnalysis":
        return cls(
            kind=ClassificationKind.UNANALYZED,
            probability=None,
            reasoning=reasoning,
            confidence=Confidence.LOW,
            unanalyzed_reason=reason,
        )

    @property
    def is_transfer_rumor(self) -> Optional[bool]:
        """Storage projection: True / False / None (not analyzed)"""
        if self.kind == ClassificationKind.UNANALYZED:
            return None
        return self.kind == ClassificationKind.TRANSFER_RUMOR


class ClassifiedNewsRecord(BaseModel):
    """Row inserted into betis_news"""
    title: str
    link: str
    pub_date: datetime
    source: str
    description: Optional[str] = None
    content_hash: str
    is_transfer_rumor: Optional[bool] = None
    ai_probability: Optional[float] = None
    ai_analysis: Optional[str] = None
    ai_confidence: Optional[Confidence] = None
    transfer_direction: Optional[TransferDirection] = None
    ai_analyzed_at: Optional[datetime] = None
    is_duplicate: bool = False

    @classmethod
    def from_analysis(
        cls,
        rumor: RumorItem,
        content_hash: str,
        analysis: RumorAnalysis,
        analyzed_at: datetime,
    ) -> "ClassifiedNewsRecord":
        analyzed = analysis.kind != ClassificationKind.UNANALYZED
        return cls(
            title=rumor.title,
            link=rumor.link,
            pub_date=rumor.pub_date,
            source=rumor.source,
            description=rumor.description,
            content_hash=content_hash,
            is_transfer_rumor=analysis.is_transfer_rumor,
            ai_probability=analysis.probability,
            ai_analysis=analysis.reasoning,
            ai_confidence=analysis.confidence,
            transfer_direction=analysis.transfer_direction,
            ai_analyzed_at=analyzed_at if analyzed else None,
        )

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class SyncResult(BaseModel):
    """Counters for one news sync run"""
    model_config = ConfigDict(populate_by_name=True)

    fetched: int = 0
    duplicates: int = 0
    transfer_rumors: int = Field(default=0, alias="transferRumors")
    regular_news: int = Field(default=0, alias="regularNews")
    not_analyzed: int = Field(default=0, alias="notAnalyzed")
    analyzed: int = 0
    inserted: int = 0
    errors: int = 0

    def to_summary(self) -> Dict[str, int]:
        return self.model_dump(by_alias=True)
