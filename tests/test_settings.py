"""Tests for settings, locales and the sync entry script."""

import os
import unittest
from unittest.mock import AsyncMock, patch

from config.settings import Settings
from core.domain.exceptions import ConfigurationError
from core.domain.models import SyncResult
from locales import t
from scripts import sync_rumors as sync_script


def load_settings(env: dict) -> Settings:
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


class TestSettings(unittest.TestCase):

    def test_public_env_names(self):
        settings = load_settings({
            "NEXT_PUBLIC_SUPABASE_URL": "https://x.supabase.co",
            "NEXT_PUBLIC_SUPABASE_ANON_KEY": "anon",
            "SUPABASE_SERVICE_ROLE_KEY": "service",
            "FOOTBALL_DATA_API_KEY": "fd",
        })
        self.assertEqual(settings.supabase_url, "https://x.supabase.co")
        self.assertEqual(settings.public_supabase_key, "anon")
        self.assertEqual(settings.supabase_service_role_key, "service")
        self.assertEqual(settings.football_data_api_key, "fd")
        settings.require_sync_credentials()

    def test_public_key_falls_back_to_service_key(self):
        settings = load_settings({"SUPABASE_URL": "https://x.supabase.co", "SUPABASE_SERVICE_KEY": "service"})
        self.assertEqual(settings.public_supabase_key, "service")

    def test_defaults(self):
        settings = load_settings({})
        self.assertEqual(settings.standings_cache_ttl_hours, 24)
        self.assertEqual(settings.news_max_age_hours, 24)
        self.assertEqual(settings.dedup_window_days, 30)
        self.assertEqual(settings.dedup_similarity_threshold, 85.0)

    def test_sync_credentials_required(self):
        with self.assertRaises(ConfigurationError):
            load_settings({"SUPABASE_URL": "https://x.supabase.co"}).require_sync_credentials()
        with self.assertRaises(ConfigurationError):
            load_settings({"SUPABASE_SERVICE_ROLE_KEY": "service"}).require_sync_credentials()


class TestLocales(unittest.TestCase):

    def test_spanish_is_default(self):
        self.assertEqual(t("standings_not_found"), "No se pudieron obtener las clasificaciones")

    def test_unknown_language_falls_back_to_spanish(self):
        self.assertEqual(t("standings_not_found", lang="ru"), "No se pudieron obtener las clasificaciones")
        self.assertEqual(t("standings_not_found", lang="en"), "Standings could not be retrieved")

    def test_unknown_key_is_returned(self):
        self.assertEqual(t("no_such_key"), "no_such_key")


class TestSyncScript(unittest.IsolatedAsyncioTestCase):

    async def test_success_exit_code(self):
        with patch.object(sync_script, "sync_rumors", new=AsyncMock(return_value=SyncResult(fetched=2))), \
                patch("builtins.print") as printed:
            self.assertEqual(await sync_script.run(), 0)
        self.assertIn('"fetched": 2', printed.call_args.args[0])

    async def test_configuration_error_exit_code(self):
        failing = AsyncMock(side_effect=ConfigurationError("missing"))
        with patch.object(sync_script, "sync_rumors", new=failing):
            self.assertEqual(await sync_script.run(), 1)

    async def test_disabled_sync_is_skipped(self):
        pipeline = AsyncMock()
        with patch.object(sync_script.features, "RUMOR_SYNC_ENABLED", False), \
                patch.object(sync_script, "sync_rumors", new=pipeline):
            self.assertEqual(await sync_script.run(), 0)
        pipeline.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
