"""
Domain constants - table names, cache keys, feeds and other static data.
Centralized here for easy modification.
"""

from core.domain.models import FeedConfig, FeedType

# === Tables ===
STANDINGS_CACHE_TABLE = "classification_cache"
NEWS_TABLE = "betis_news"

# Standings cache holds a single row
STANDINGS_CACHE_ROW_ID = 1
STANDINGS_CACHE_TTL_HOURS = 24

# === Football-Data.org ===
COMPETITIONS = {
    "LALIGA": "PD",        # Primera División
    "COPA_REY": "CDR",
    "CHAMPIONS": "CL",
    "EUROPA": "EL",
    "CONFERENCE": "ECL",
}
REAL_BETIS_TEAM_ID = 90
STANDINGS_TABLE_TYPE = "TOTAL"

# === News sync ===
DEDUP_WINDOW_DAYS = 30
DEDUP_SIMILARITY_THRESHOLD = 85.0
DEFAULT_NEWS_MAX_AGE_HOURS = 24

FEED_USER_AGENT = "Pena-Betica-Escocesa/1.0"
MISSING_TITLE = "Sin título"
MISSING_LINK = "#"

# Telegram channels come through the tg.i-c-a.su RSS bridge (no auth)
FEED_CONFIGS = [
    FeedConfig(
        url="https://news.google.com/rss/search?q=Real+Betis+fichajes+rumores&hl=es&gl=ES&ceid=ES:es",
        source="Google News (Fichajes)",
        type=FeedType.RSS,
    ),
    FeedConfig(
        url="https://news.google.com/rss/search?q=Real+Betis&hl=es&gl=ES&ceid=ES:es",
        source="Google News (General)",
        type=FeedType.RSS,
    ),
    FeedConfig(url="https://betisweb.com/feed/", source="BetisWeb", type=FeedType.RSS),
    FeedConfig(
        url="https://tg.i-c-a.su/rss/FabrizioRomanoTG",
        source="Telegram: @FabrizioRomanoTG",
        type=FeedType.TELEGRAM,
    ),
    FeedConfig(
        url="https://tg.i-c-a.su/rss/ficherioRealBetis",
        source="Telegram: @ficherioRealBetis",
        type=FeedType.TELEGRAM,
    ),
    FeedConfig(
        url="https://tg.i-c-a.su/rss/Todo_betis",
        source="Telegram: @Todo_betis",
        type=FeedType.TELEGRAM,
    ),
    FeedConfig(
        url="https://tg.i-c-a.su/rss/DMQRealBetis",
        source="Telegram: @DMQRealBetis",
        type=FeedType.TELEGRAM,
    ),
    FeedConfig(
        url="https://tg.i-c-a.su/rss/transfer_news_football",
        source="Telegram: @transfer_news_football",
        type=FeedType.TELEGRAM,
    ),
    FeedConfig(
        url="https://tg.i-c-a.su/rss/real_betis_balompi",
        source="Telegram: @real_betis_balompi",
        type=FeedType.TELEGRAM,
    ),
]
