from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .. import __version__
from ..ai import Classifier
from ..ai.types import DEFAULT_CONTENT_TYPE, ImageUpload
from ..errors import PROCESSING_FAILED_MESSAGE, IndenticatError, ValidationError
from ..web import register_ui
from .config_loader import DEFAULT_CONFIG_PATH, load_config
from .schemas import ErrorResponse, IdentifyResponse
from .service import IdentificationService


logger = logging.getLogger(__name__)


def _default_classifier() -> Classifier:
    from ..ai.gemini_client import GeminiEmsClassifier

    cfg = load_config(DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else None)
    return GeminiEmsClassifier(
        api_key=os.environ.get(cfg.gemini.api_key_env, ""),
        model=cfg.gemini.model,
        base_url=cfg.gemini.base_url,
        stream=cfg.gemini.stream,
        timeout=cfg.gemini.timeout,
    )


def create_app(classifier: Classifier | None = None) -> FastAPI:
    selected_classifier = classifier or _default_classifier()
    service = IdentificationService(classifier=selected_classifier)

    app = FastAPI(title="Indenticat API", version=__version__)
    app.state.classifier = selected_classifier
    app.state.service = service

    logger.info(
        "API server initialised classifier=%s",
        selected_classifier.__class__.__name__,
    )

    @app.exception_handler(ValidationError)
    async def _handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected request path=%s error=%s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": exc.public_message})

    @app.exception_handler(IndenticatError)
    async def _handle_processing_error(
        request: Request, exc: IndenticatError
    ) -> JSONResponse:
        logger.error("Request failed path=%s error=%s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": PROCESSING_FAILED_MESSAGE})

    @app.get("/health", response_model=dict[str, str])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/api/identify",
        response_model=IdentifyResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def identify_image(
        image: Optional[UploadFile] = File(default=None),
    ) -> IdentifyResponse:
        upload: ImageUpload | None = None
        if image is not None:
            data = await image.read()
            upload = ImageUpload(
                data=data,
                content_type=image.content_type or DEFAULT_CONTENT_TYPE,
                filename=image.filename,
            )
        result = await run_in_threadpool(service.identify, upload)
        return IdentifyResponse.from_result(result)

    register_ui(app)

    return app


__all__ = ["create_app"]
