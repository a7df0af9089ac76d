"""
Deduplication service - content hashing and fuzzy matching for news items.
"""

import hashlib
import logging
import re
import unicodedata
from typing import Iterable, Optional

from rapidfuzz import fuzz

from core.domain.constants import DEDUP_SIMILARITY_THRESHOLD
from core.domain.models import DuplicateCheck

logger = logging.getLogger(__name__)


def normalize_text(text: Optional[str]) -> str:
    """Lower-case, strip accents and punctuation, collapse whitespace"""
    if not text:
        return ""
    text = unicodedata.normalize("NFKD", text.lower())
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = re.sub(r"[^\w\s]", " ", text)
    return re.sub(r"\s+", " ", text).strip()


def generate_content_hash(title: str, description: Optional[str] = None) -> str:
    base = f"{normalize_text(title)}|{normalize_text(description)}"
    return hashlib.sha256(base.encode("utf-8")).hexdigest()


def fuzzy_text(title: Optional[str], description: Optional[str]) -> str:
    """Text compared by the fuzzy matcher: lower-cased 'title description'"""
    return f"{title or ''} {description or ''}".lower()


def calculate_similarity(a: str, b: str) -> float:
    """Word-order-insensitive similarity, 0-100"""
    if not a.strip() or not b.strip():
        return 0.0
    return round(fuzz.token_sort_ratio(a, b), 2)


class DeduplicationService:
    """Detects near-duplicate news against records from the rolling window"""

    def __init__(self, similarity_threshold: float = DEDUP_SIMILARITY_THRESHOLD):
        self.similarity_threshold = similarity_threshold

    def check_duplicate(
        self,
        title: str,
        description: Optional[str],
        existing: Iterable[dict],
    ) -> DuplicateCheck:
        content_hash = generate_content_hash(title, description)
        candidate = fuzzy_text(title, description)
        best_id = None
        best_score = 0.0

        for record in existing:
            if record.get("content_hash") == content_hash:
                return DuplicateCheck(
                    content_hash=content_hash,
                    is_duplicate=True,
                    duplicate_of_id=record.get("id"),
                    similarity_score=100.0,
                )
            score = calculate_similarity(
                candidate,
                fuzzy_text(record.get("title"), record.get("description")),
            )
            if score > best_score:
                best_id, best_score = record.get("id"), score

        if best_score >= self.similarity_threshold:
            logger.debug(f"[DEDUPE] '{title[:60]}' matches #{best_id} ({best_score})")
            return DuplicateCheck(
                content_hash=content_hash,
                is_duplicate=True,
                duplicate_of_id=best_id,
                similarity_score=best_score,
            )

        return DuplicateCheck(content_hash=content_hash, is_duplicate=False)
