"""
REST API adapter - public JSON routes served with aiohttp.
"""

from adapters.api.app import create_api_app

__all__ = ["create_api_app"]
