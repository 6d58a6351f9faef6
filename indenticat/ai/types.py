from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

DEFAULT_CONTENT_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ImageUpload:
    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE
    filename: str | None = None


@dataclass(frozen=True)
class ClassificationResult:
    ems_code: str | None
    detected: bool
    message: str | None
    confidence: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "emsCode": self.ems_code,
            "detected": self.detected,
            "message": self.message,
            "confidence": self.confidence,
        }


class Classifier(Protocol):
    def classify(self, image: ImageUpload) -> ClassificationResult: ...


__all__ = ["ClassificationResult", "Classifier", "DEFAULT_CONTENT_TYPE", "ImageUpload"]
