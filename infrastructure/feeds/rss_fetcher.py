"""
RSS / Telegram-bridge feed fetcher for Betis news.
"""

import asyncio
import logging
import calendar
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Sequence

import feedparser
import httpx
from dateutil import parser as dtparser

from config.settings import Settings
from core.domain.constants import FEED_CONFIGS, FEED_USER_AGENT, MISSING_LINK, MISSING_TITLE
from core.domain.models import FeedConfig, FeedType, RumorItem
from core.interfaces.providers import IRumorFetcher
from core.utils.business_log import log_business

logger = logging.getLogger(__name__)


def parse_published(entry: Any) -> Optional[datetime]:
    """feedparser exposes published/updated strings and *_parsed struct_times"""
    for key in ("published", "updated", "created"):
        value = entry.get(key)
        if value:
            try:
                dt = dtparser.parse(value)
                return dt.astimezone(timezone.utc) if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
            except (ValueError, OverflowError):
                pass
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if parsed:
        return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
    return None


def entry_to_rumor(entry: Any, config: FeedConfig, now: datetime) -> RumorItem:
    description = entry.get("summary") or None
    if not description and entry.get("content"):
        description = entry["content"][0].get("value") or None
    return RumorItem(
        title=entry.get("title") or MISSING_TITLE,
        link=entry.get("link") or MISSING_LINK,
        pub_date=parse_published(entry) or now,
        source=config.source,
        description=description,
    )


class RSSFetcherService(IRumorFetcher):
    """Fetches every configured feed; a broken feed only loses its own items."""

    def __init__(
        self,
        settings: Settings,
        feeds: Sequence[FeedConfig] = FEED_CONFIGS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.feeds = list(feeds)
        self.timeout = settings.feed_timeout_seconds
        self.default_max_age_hours = settings.news_max_age_hours
        self._transport = transport

    async def _download(self, client: httpx.AsyncClient, url: str) -> bytes:
        response = await client.get(url)
        response.raise_for_status()
        return response.content

    async def fetch_feed(self, client: httpx.AsyncClient, config: FeedConfig) -> List[RumorItem]:
        """Fetch rumors from a single feed; errors are logged and yield []"""
        try:
            body = await self._download(client, config.url)
            parsed = feedparser.parse(body)
            if parsed.bozo and not parsed.entries:
                raise ValueError(f"Unparseable feed: {parsed.bozo_exception}")
            now = datetime.now(timezone.utc)
            return [entry_to_rumor(entry, config, now) for entry in parsed.entries]
        except Exception as e:
            if config.type == FeedType.TELEGRAM:
                logger.error(f"[FEEDS] Telegram feed bridge failed ({config.source}, {config.url}): {e}")
            else:
                logger.error(f"[FEEDS] Failed to fetch RSS feed ({config.source}, {config.url}): {e}")
            return []

    async def fetch_all_rumors(self, max_age_hours: Optional[int] = None) -> List[RumorItem]:
        """
        Fetch and merge all feeds.
        max_age_hours: drop items older than this (default from settings, 24h).
        """
        headers = {
            "User-Agent": FEED_USER_AGENT,
            "Accept": "application/rss+xml, application/xml, text/xml, */*",
        }
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=headers,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            per_feed = await asyncio.gather(*(self.fetch_feed(client, config) for config in self.feeds))

        all_rumors = [rumor for items in per_feed for rumor in items]

        max_age = max_age_hours or self.default_max_age_hours
        cutoff = datetime.now(timezone.utc) - timedelta(hours=max_age)
        filtered = [rumor for rumor in all_rumors if rumor.pub_date >= cutoff]

        log_business(
            "rumors_filtered_by_age",
            total=len(all_rumors),
            filtered=len(filtered),
            maxAgeHours=max_age,
            cutoffDate=cutoff.isoformat(),
        )

        return sorted(filtered, key=lambda rumor: rumor.pub_date, reverse=True)
