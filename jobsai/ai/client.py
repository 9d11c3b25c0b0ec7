from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any

import requests

from jobsai.ai.errors import FlowOutputError, FlowUnavailableError
from jobsai.config import settings


logger = logging.getLogger(__name__)


def _extract_json(text: str) -> Any | None:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        pass
    # Models occasionally wrap the JSON in prose or a code fence.
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        try:
            return json.loads(text[start : end + 1])
        except ValueError:
            return None
    return None


def _candidate_text(data: Any) -> str | None:
    """Concatenate the text parts of the first candidate; None when the reply has another shape."""

    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates") or [{}]
    if not isinstance(candidates, list) or not isinstance(candidates[0], dict):
        return None
    content = candidates[0].get("content") or {}
    if not isinstance(content, dict):
        return None
    parts = content.get("parts") or [{}]
    if not isinstance(parts, list) or not all(isinstance(part, dict) for part in parts):
        return None
    return "".join(str(part.get("text") or "") for part in parts)


class GeminiClient:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        endpoint: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.endpoint = (endpoint or settings.gemini_endpoint).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.gemini_timeout_seconds
        self._session = session or requests.Session()

    def enabled(self) -> bool:
        return bool(self.api_key)

    def generate_json(self, prompt: str) -> Any | None:
        """Send a single prompt and return the decoded JSON reply, or None when unparseable."""

        if not self.enabled():
            raise FlowUnavailableError("AI service is not configured.")

        url = f"{self.endpoint}/{self.model}:generateContent"
        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"responseMimeType": "application/json"},
        }
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}
        try:
            r = self._session.post(url, json=body, headers=headers, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("gemini.request_failed model=%s error=%s", self.model, exc)
            raise FlowOutputError("AI service request failed.") from exc

        text = _candidate_text(data)
        if text is None:
            logger.warning("gemini.unexpected_response model=%s type=%s", self.model, type(data).__name__)
            return None
        parsed = _extract_json(text)
        if parsed is None:
            logger.warning("gemini.unparseable_response model=%s chars=%d", self.model, len(text))
        return parsed


@lru_cache
def get_generation_client() -> GeminiClient:
    return GeminiClient()
