"""
OpenAI GPT service implementation.
Classifies Betis news as transfer rumor / regular news and scores credibility.
"""

import json
import re
import logging
from typing import Dict, Any, Optional
from openai import AsyncOpenAI, RateLimitError
from pydantic import ValidationError

from config.features import features
from config.settings import Settings
from core.domain.models import (
    ClassificationKind,
    Confidence,
    ExtractedPlayer,
    PlayerRole,
    RumorAnalysis,
    TransferDirection,
)
from core.interfaces.ai import INewsClassifier
from core.utils.business_log import log_business
from locales import t

logger = logging.getLogger(__name__)


RUMOR_ANALYSIS_PROMPT = """Analiza esta noticia del Real Betis Balompié (equipo de fútbol de Sevilla, España):

Título: {title}
Descripción: {description}
Fuente: {source}

INSTRUCCIONES:
1. Determina si es un RUMOR DE FICHAJE (transferencia de jugador). NO es fichaje: partidos, lesiones, declaraciones, premios, inocentadas/bromas.
2. Si es fichaje: evalúa credibilidad 0-100 y dirección ("in"=jugador llega al Betis, "out"=jugador sale del Betis).
3. EXTRACCIÓN DE JUGADORES:
   - "target": jugador que el Betis quiere fichar o está interesado
   - "departing": jugador que podría salir del Betis
   - Usa el nombre completo del jugador (ej: "Giovani Lo Celso", no solo "Lo Celso")

JSON (solo el JSON, sin markdown):
{{"isTransferRumor":<bool>,"probability":<0-100|null>,"reasoning":"<explicación breve>","confidence":"<low|medium|high>","transferDirection":"<in|out|unknown|null>","players":[{{"name":"<nombre completo>","role":"<target|departing>"}}]}}"""


def _is_quota_error(error: Exception) -> bool:
    if isinstance(error, RateLimitError):
        return True
    message = str(error).lower()
    return "429" in message or "quota" in message or "rate limit" in message


def _strip_markdown(text: str) -> str:
    text = re.sub(r'```json\s*', '', text)
    text = re.sub(r'```\s*', '', text)
    return text.strip()


def _parse_enum(enum_cls, value, default=None):
    try:
        return enum_cls(value) if value is not None else default
    except ValueError:
        return default


def parse_analysis(data: Dict[str, Any]) -> RumorAnalysis:
    """Convert the model's JSON reply into a RumorAnalysis"""
    flag = data.get("isTransferRumor")
    reasoning = data.get("reasoning") or ""
    confidence = _parse_enum(Confidence, data.get("confidence"), Confidence.LOW)

    if flag is None:
        return RumorAnalysis.unanalyzed("model_abstained", reasoning or t("rumor_not_analyzed"))

    players = []
    for player in data.get("players") or []:
        if isinstance(player, dict) and player.get("name"):
            players.append(ExtractedPlayer(
                name=player["name"],
                role=_parse_enum(PlayerRole, player.get("role"), PlayerRole.MENTIONED),
            ))

    if flag:
        probability = data.get("probability")
        if probability is not None:
            probability = max(0.0, min(100.0, float(probability)))
        return RumorAnalysis(
            kind=ClassificationKind.TRANSFER_RUMOR,
            probability=probability,
            reasoning=reasoning,
            confidence=confidence,
            transfer_direction=_parse_enum(TransferDirection, data.get("transferDirection"), TransferDirection.UNKNOWN),
            players=players,
        )

    return RumorAnalysis(
        kind=ClassificationKind.REGULAR_NEWS,
        probability=0.0,
        reasoning=reasoning,
        confidence=confidence,
        players=players,
    )


class OpenAINewsClassifier(INewsClassifier):
    """OpenAI GPT-based news classifier"""

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.client = client or AsyncOpenAI(api_key=settings.openai_api_key)
        self.model = settings.openai_model  # gpt-4o-mini: fast and cheap

    async def analyze_rumor_credibility(
        self,
        title: str,
        description: str,
        source: str,
    ) -> RumorAnalysis:
        """
        Classify one news item.
        Quota errors and unreadable replies come back as UNANALYZED;
        any other failure is raised to the caller.
        """
        prompt = RUMOR_ANALYSIS_PROMPT.format(
            title=title,
            description=description or t("rumor_no_description"),
            source=source,
        )

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=600,
                temperature=0.1,
                messages=[{"role": "user", "content": prompt}]
            )
        except Exception as e:
            if _is_quota_error(e):
                logger.error(f"[AI] Quota exceeded - storing '{title[:80]}' without analysis: {e}")
                return RumorAnalysis.unanalyzed("quota", t("rumor_not_analyzed"))
            raise

        text = response.choices[0].message.content or ""
        if features.LOG_AI_RESPONSES:
            logger.debug(f"[AI] Raw rumor analysis: {text[:500]}")

        try:
            analysis = parse_analysis(json.loads(_strip_markdown(text)))
        except (json.JSONDecodeError, AttributeError, TypeError, ValueError, ValidationError) as e:
            logger.error(f"[AI] Failed to parse rumor analysis JSON: {text[:300]} Error: {e}")
            return RumorAnalysis.unanalyzed("invalid_response", t("rumor_not_analyzed"))

        log_business(
            "rumor_analyzed",
            kind=analysis.kind.value,
            probability=analysis.probability,
            confidence=analysis.confidence.value,
            playerCount=len(analysis.players),
        )
        return analysis
