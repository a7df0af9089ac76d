from infrastructure.feeds.rss_fetcher import RSSFetcherService

__all__ = ["RSSFetcherService"]
