"""Tests for the feed fetcher."""

import os
import unittest
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from unittest.mock import patch

import httpx

from config.settings import Settings
from core.domain.models import FeedConfig, FeedType
from infrastructure.feeds.rss_fetcher import RSSFetcherService, parse_published

NOW = datetime.now(timezone.utc)


def rss(*items: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Feed</title>'
        + "".join(items)
        + "</channel></rss>"
    )


def item(title=None, link=None, age=timedelta(hours=1), description="Resumen"):
    parts = ["<item>"]
    if title:
        parts.append(f"<title>{title}</title>")
    if link:
        parts.append(f"<link>{link}</link>")
    parts.append(f"<description>{description}</description>")
    parts.append(f"<pubDate>{format_datetime(NOW - age)}</pubDate>")
    parts.append("</item>")
    return "".join(parts)


FEEDS = [
    FeedConfig(url="https://feeds.test/a.xml", source="Fuente A"),
    FeedConfig(url="https://feeds.test/b.xml", source="Fuente B"),
    FeedConfig(url="https://tg.test/rss/canal", source="Telegram Canal", type=FeedType.TELEGRAM),
]


def make_settings() -> Settings:
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


class TestRSSFetcherService(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.bodies = {
            "/a.xml": rss(
                item("Betis: fichaje en marcha", "https://a.test/1", age=timedelta(hours=3)),
                item("Noticia antigua", "https://a.test/2", age=timedelta(hours=30)),
            ),
            "/b.xml": rss(item("Última hora verdiblanca", "https://b.test/1", age=timedelta(minutes=10))),
        }
        self.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            body = self.bodies.get(request.url.path)
            if body is None:
                return httpx.Response(502, text="Bad gateway")
            return httpx.Response(200, text=body, headers={"Content-Type": "application/rss+xml"})

        self.fetcher = RSSFetcherService(make_settings(), feeds=FEEDS, transport=httpx.MockTransport(handler))

    async def test_failing_feed_does_not_affect_others(self):
        rumors = await self.fetcher.fetch_all_rumors()

        self.assertEqual(len(self.requests), 3)
        self.assertEqual([r.title for r in rumors], ["Última hora verdiblanca", "Betis: fichaje en marcha"])
        self.assertEqual(rumors[0].source, "Fuente B")
        self.assertEqual(rumors[1].link, "https://a.test/1")
        self.assertEqual(rumors[1].description, "Resumen")

    async def test_user_agent_header(self):
        await self.fetcher.fetch_all_rumors()

        self.assertEqual(self.requests[0].headers["User-Agent"], "Pena-Betica-Escocesa/1.0")

    async def test_max_age_override(self):
        rumors = await self.fetcher.fetch_all_rumors(max_age_hours=48)

        self.assertEqual(len(rumors), 3)
        self.assertEqual(rumors[-1].title, "Noticia antigua")

    async def test_missing_title_and_link_get_placeholders(self):
        self.bodies["/a.xml"] = rss(item(age=timedelta(minutes=5)))

        rumors = await self.fetcher.fetch_all_rumors()

        placeholder = [r for r in rumors if r.source == "Fuente A"][0]
        self.assertEqual(placeholder.title, "Sin título")
        self.assertEqual(placeholder.link, "#")

    async def test_all_feeds_failing_yields_empty_list(self):
        self.bodies.clear()

        self.assertEqual(await self.fetcher.fetch_all_rumors(), [])


class TestParsePublished(unittest.TestCase):

    def test_rfc822_with_offset_is_converted_to_utc(self):
        parsed = parse_published({"published": "Wed, 15 Jan 2025 14:00:00 +0200"})
        self.assertEqual(parsed, datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc))

    def test_naive_dates_are_utc(self):
        parsed = parse_published({"updated": "2025-01-15T12:00:00"})
        self.assertEqual(parsed.tzinfo, timezone.utc)

    def test_missing_date(self):
        self.assertIsNone(parse_published({}))


if __name__ == "__main__":
    unittest.main()
