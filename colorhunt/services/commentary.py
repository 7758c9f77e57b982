"""Short judge comments for a round, written by a generative text model.

The comment is decoration: every failure ends in a fixed fallback string and
never reaches the score-saving flow.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import httpx

from ..core.config import COMMENTARY_TIMEOUT, GEMINI_API_KEY, GEMINI_MODEL
from ..core.logging import setup_logger
from .colors import rgb_to_hex

logger = setup_logger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"

FALLBACK_COMMENTARY = "素晴らしい色覚の持ち主ですね！"
EMPTY_COMMENTARY = "いい色だね！✨"


def build_prompt(target_name: str, captured_hex: str, score: int) -> str:
    return (
        "あなたは「いろあわせ！カラーハンター」というゲームの審判です。\n"
        "小学生が遊んでいます。\n"
        f"お題の色: {target_name}\n"
        f"撮影された色: {captured_hex}\n"
        f"マッチ度: {score}%\n\n"
        "この結果に対して、短く、とても優しくて楽しい日本語のコメントを1つ生成してください。\n"
        "漢字は少なめにして、ひらがなを多めに使ってください。\n"
        "80点以上ならたくさん褒めて、50点以下でも次はもっと似ている色を探そうと励ましてください。\n"
        "絵文字をたくさん使ってください。"
    )


def extract_text(payload: Dict[str, Any]) -> str:
    """Pull the generated text out of a ``generateContent`` response."""

    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts).strip()


class CommentaryGenerator:
    """Client for the Gemini ``generateContent`` REST endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = GEMINI_API_KEY,
        model: str = GEMINI_MODEL,
        timeout: float = COMMENTARY_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def _request(self, prompt: str) -> Dict[str, Any]:
        url = f"{API_BASE}/models/{self.model}:generateContent"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                url,
                headers={"x-goog-api-key": self.api_key or ""},
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()
            return response.json()

    async def generate(
        self, target_name: str, target_hex: str, captured: Sequence[int], score: int
    ) -> str:
        """Return a comment for the round, or the fallback on any failure."""

        if not self.api_key:
            logger.warning("GEMINI_API_KEY is not set, using fallback commentary")
            return FALLBACK_COMMENTARY

        try:
            prompt = build_prompt(target_name, rgb_to_hex(captured), score)
            payload = await self._request(prompt)
            text = extract_text(payload)
        except Exception:
            logger.exception("Commentary generation failed for target %s (%s)", target_name, target_hex)
            return FALLBACK_COMMENTARY

        return text or EMPTY_COMMENTARY


__all__ = [
    "CommentaryGenerator",
    "EMPTY_COMMENTARY",
    "FALLBACK_COMMENTARY",
    "build_prompt",
    "extract_text",
]
