from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

from .types import ClassificationResult

logger = logging.getLogger(__name__)

# Only fences tagged with a language (```json) are unwrapped.
_FENCED_BLOCK = re.compile(r"```[A-Za-z0-9_+-]+[^\S\n]*\n?(.*?)```", re.DOTALL)


def normalize_reply(text: str) -> ClassificationResult:
    """Turn the model's reply text into a ClassificationResult.

    Never raises: a reply that is not a JSON object becomes an undetected
    result carrying the raw text as its message.
    """
    trimmed = (text or "").strip()
    candidate = _extract_fenced_json(trimmed)

    try:
        payload = json.loads(candidate)
    except (json.JSONDecodeError, TypeError):
        payload = None
    if not isinstance(payload, dict):
        logger.warning("Model reply was not a JSON object; returning raw text")
        return ClassificationResult(
            ems_code=None, detected=False, message=text, confidence=0
        )

    ems_code = payload.get("ems_code") or None
    if ems_code is not None:
        ems_code = str(ems_code)

    message_value = payload.get("message")
    message = str(message_value) if message_value is not None else None

    return ClassificationResult(
        ems_code=ems_code,
        detected=bool(payload.get("detected", False)),
        message=message,
        confidence=normalize_confidence(payload.get("confidence", 0)),
    )


def normalize_confidence(value: Any) -> int:
    """Map a 0-1 fraction or a 0-100 percentage onto an integer percentage.

    Values <= 1 are read as fractions, so a reported 1 means 100 rather
    than 1 percent.
    """
    try:
        score = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(score):
        return 0
    if score <= 1:
        score *= 100
    rounded = math.floor(score + 0.5) if math.isfinite(score) else score
    return int(max(0, min(100, rounded)))


def _extract_fenced_json(text: str) -> str:
    match = _FENCED_BLOCK.search(text)
    if match is None:
        return text
    return match.group(1).strip()


__all__ = ["normalize_confidence", "normalize_reply"]
