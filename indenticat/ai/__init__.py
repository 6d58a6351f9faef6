from __future__ import annotations

from .normalizer import normalize_confidence, normalize_reply
from .types import ClassificationResult, Classifier, ImageUpload

__all__ = [
    "ClassificationResult",
    "Classifier",
    "ImageUpload",
    "GeminiEmsClassifier",
    "normalize_confidence",
    "normalize_reply",
]


def __getattr__(name: str):
    if name == "GeminiEmsClassifier":
        from .gemini_client import GeminiEmsClassifier

        return GeminiEmsClassifier
    raise AttributeError(f"module 'indenticat.ai' has no attribute {name!r}")
