"""Tests for the OpenAI news classifier."""

import json
import os
import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai

from config.settings import Settings
from core.domain.models import ClassificationKind, Confidence, PlayerRole, TransferDirection
from infrastructure.ai.openai_service import OpenAINewsClassifier, parse_analysis

NOT_ANALYZED = "No se pudo analizar este rumor automáticamente."


def make_settings() -> Settings:
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None, openai_api_key="test-key")


def completion(text: str):
    message = SimpleNamespace(content=text)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def rate_limit_error() -> openai.RateLimitError:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return openai.RateLimitError("quota exceeded", response=httpx.Response(429, request=request), body=None)


class TestOpenAINewsClassifier(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.client.chat.completions.create = AsyncMock()
        self.classifier = OpenAINewsClassifier(make_settings(), client=self.client)

    def reply(self, payload):
        text = payload if isinstance(payload, str) else json.dumps(payload)
        self.client.chat.completions.create.return_value = completion(text)

    async def test_transfer_rumor(self):
        self.reply({
            "isTransferRumor": True,
            "probability": 75,
            "reasoning": "Fuente fiable",
            "confidence": "high",
            "transferDirection": "in",
            "players": [{"name": "Giovani Lo Celso", "role": "target"}],
        })

        analysis = await self.classifier.analyze_rumor_credibility("Lo Celso vuelve", "desc", "ABC")

        self.assertEqual(analysis.kind, ClassificationKind.TRANSFER_RUMOR)
        self.assertTrue(analysis.is_transfer_rumor)
        self.assertEqual(analysis.probability, 75)
        self.assertEqual(analysis.confidence, Confidence.HIGH)
        self.assertEqual(analysis.transfer_direction, TransferDirection.IN)
        self.assertEqual(analysis.players[0].name, "Giovani Lo Celso")
        self.assertEqual(analysis.players[0].role, PlayerRole.TARGET)
        prompt = self.client.chat.completions.create.await_args.kwargs["messages"][0]["content"]
        self.assertIn("Lo Celso vuelve", prompt)
        self.assertIn("ABC", prompt)

    async def test_markdown_fences_are_stripped(self):
        self.reply('```json\n{"isTransferRumor": false, "reasoning": "Crónica", "confidence": "medium"}\n```')

        analysis = await self.classifier.analyze_rumor_credibility("Crónica", None, "ABC")

        self.assertEqual(analysis.kind, ClassificationKind.REGULAR_NEWS)
        self.assertIs(analysis.is_transfer_rumor, False)
        self.assertEqual(analysis.probability, 0)

    async def test_quota_error_returns_unanalyzed(self):
        self.client.chat.completions.create.side_effect = rate_limit_error()

        analysis = await self.classifier.analyze_rumor_credibility("T", "D", "S")

        self.assertEqual(analysis.kind, ClassificationKind.UNANALYZED)
        self.assertIsNone(analysis.is_transfer_rumor)
        self.assertIsNone(analysis.probability)
        self.assertEqual(analysis.unanalyzed_reason, "quota")
        self.assertEqual(analysis.reasoning, NOT_ANALYZED)

    async def test_quota_message_is_detected(self):
        self.client.chat.completions.create.side_effect = Exception("You exceeded your current quota")

        analysis = await self.classifier.analyze_rumor_credibility("T", "D", "S")

        self.assertEqual(analysis.unanalyzed_reason, "quota")

    async def test_other_errors_propagate(self):
        self.client.chat.completions.create.side_effect = RuntimeError("connection reset")

        with self.assertRaises(RuntimeError):
            await self.classifier.analyze_rumor_credibility("T", "D", "S")

    async def test_invalid_json_returns_unanalyzed(self):
        self.reply("not json at all")

        analysis = await self.classifier.analyze_rumor_credibility("T", "D", "S")

        self.assertEqual(analysis.kind, ClassificationKind.UNANALYZED)
        self.assertEqual(analysis.unanalyzed_reason, "invalid_response")

    async def test_null_flag_returns_unanalyzed(self):
        self.reply({"isTransferRumor": None, "reasoning": "Ambiguo"})

        analysis = await self.classifier.analyze_rumor_credibility("T", "D", "S")

        self.assertEqual(analysis.kind, ClassificationKind.UNANALYZED)
        self.assertEqual(analysis.unanalyzed_reason, "model_abstained")


class TestParseAnalysis(unittest.TestCase):

    def test_probability_is_clamped(self):
        self.assertEqual(parse_analysis({"isTransferRumor": True, "probability": 140}).probability, 100)
        self.assertEqual(parse_analysis({"isTransferRumor": True, "probability": -5}).probability, 0)

    def test_unknown_enum_values_fall_back(self):
        analysis = parse_analysis({
            "isTransferRumor": True,
            "confidence": "certain",
            "transferDirection": "sideways",
            "players": [{"name": "Isco", "role": "captain"}, {"role": "target"}],
        })
        self.assertEqual(analysis.confidence, Confidence.LOW)
        self.assertEqual(analysis.transfer_direction, TransferDirection.UNKNOWN)
        self.assertEqual([p.name for p in analysis.players], ["Isco"])
        self.assertEqual(analysis.players[0].role, PlayerRole.MENTIONED)


if __name__ == "__main__":
    unittest.main()
