from __future__ import annotations

import logging
from dataclasses import dataclass

from ..ai import Classifier
from ..ai.types import ClassificationResult, ImageUpload
from ..errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class IdentificationService:
    classifier: Classifier

    def identify(self, image: ImageUpload | None) -> ClassificationResult:
        if image is None or not image.data:
            raise ValidationError()

        logger.info(
            "Identify image filename=%s content_type=%s bytes=%d",
            image.filename,
            image.content_type,
            len(image.data),
        )
        try:
            result = self.classifier.classify(image)
        except UpstreamError as exc:
            logger.error(
                "Upstream identification failed status=%s error=%s body=%s",
                exc.status_code,
                exc,
                exc.body,
            )
            raise
        except Exception as exc:
            logger.exception("Identification failed filename=%s", image.filename)
            raise UpstreamError(f"Identification failed: {exc}") from exc

        logger.info(
            "Identification complete detected=%s ems_code=%s confidence=%d",
            result.detected,
            result.ems_code,
            result.confidence,
        )
        return result


__all__ = ["IdentificationService"]
