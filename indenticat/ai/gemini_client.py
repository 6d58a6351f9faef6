from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from ..errors import UpstreamError
from .normalizer import normalize_reply
from .taxonomy import EMS_REFERENCE, INSTRUCTION
from .types import DEFAULT_CONTENT_TYPE, ClassificationResult, Classifier, ImageUpload

logger = logging.getLogger(__name__)

# Static switch; not exposed through configuration.
ENABLE_EXTENDED_REASONING = False

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "ems_code": {
            "type": "STRING",
            "nullable": True,
            "description": "EMS code of the cat, or null when no cat is present",
        },
        "detected": {
            "type": "BOOLEAN",
            "description": "Whether a cat was detected in the image",
        },
        "message": {
            "type": "STRING",
            "description": "Human-readable breed, colour and pattern description",
        },
        "confidence": {
            "type": "NUMBER",
            "description": "Confidence in the EMS code, between 0 and 100",
        },
    },
    "required": ["ems_code", "detected", "message", "confidence"],
}


@dataclass
class GeminiEmsClassifier(Classifier):
    """Identify EMS codes by delegating to the Google Gemini multimodal API."""

    api_key: str
    model: str = "gemini-2.0-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    stream: bool = True
    timeout: float | None = None
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    def classify(self, image: ImageUpload) -> ClassificationResult:
        if not self.api_key:
            raise UpstreamError("Gemini API key is required to identify images")

        payload = self.build_payload(image)
        response_data = self._send_request(self.endpoint_url, payload)
        message = self._extract_message_content(response_data)
        return normalize_reply(message)

    @property
    def endpoint_url(self) -> str:
        method = "streamGenerateContent" if self.stream else "generateContent"
        model = self.model if self.model.startswith("models/") else f"models/{self.model}"
        return f"{self.base_url.rstrip('/')}/{model}:{method}"

    def build_payload(self, image: ImageUpload) -> dict[str, Any]:
        encoded = base64.b64encode(image.data).decode("ascii")
        generation_config: dict[str, Any] = {
            "temperature": 0.0,
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA,
        }
        if ENABLE_EXTENDED_REASONING:
            generation_config["thinkingConfig"] = {"thinkingBudget": -1}
        return {
            "systemInstruction": {"parts": [{"text": EMS_REFERENCE}]},
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": INSTRUCTION},
                        {
                            "inline_data": {
                                "mime_type": image.content_type or DEFAULT_CONTENT_TYPE,
                                "data": encoded,
                            }
                        },
                    ],
                }
            ],
            "generationConfig": generation_config,
        }

    def _send_request(self, url: str, payload: dict[str, Any]) -> Any:
        try:
            response = self.session.post(
                url,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamError(f"Failed to reach Gemini API: {exc}") from exc

        if not response.ok:
            raise UpstreamError(
                f"Gemini API request failed with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(
                "Gemini API returned a non-JSON envelope",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def _extract_message_content(self, data: Any) -> str:
        """Concatenate candidate text across a single reply or streamed chunks."""
        if isinstance(data, dict):
            chunks = [data]
        elif isinstance(data, list):
            chunks = data
        else:
            raise UpstreamError("Unexpected response format from Gemini API")

        fragments: list[str] = []
        for chunk in chunks:
            if not isinstance(chunk, dict):
                continue
            candidates = chunk.get("candidates") or []
            if not candidates:
                continue
            content = candidates[0].get("content") or {}
            for part in content.get("parts") or []:
                text = part.get("text")
                if isinstance(text, str):
                    fragments.append(text)
        logger.debug("Gemini reply chunks=%d characters=%d", len(chunks), sum(map(len, fragments)))
        return "".join(fragments)


__all__ = ["ENABLE_EXTENDED_REASONING", "GeminiEmsClassifier", "RESPONSE_SCHEMA"]
