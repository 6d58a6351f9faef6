from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..ai.types import ClassificationResult


class IdentifyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ems_code: str | None = Field(default=None, alias="emsCode")
    detected: bool = False
    message: str | None = None
    confidence: int = Field(default=0, ge=0, le=100)

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "IdentifyResponse":
        return cls(
            ems_code=result.ems_code,
            detected=result.detected,
            message=result.message,
            confidence=result.confidence,
        )


class ErrorResponse(BaseModel):
    error: str


__all__ = ["ErrorResponse", "IdentifyResponse"]
