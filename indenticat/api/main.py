from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from ..ai import GeminiEmsClassifier
from .config_loader import DEFAULT_CONFIG_PATH, AppConfig, load_config
from .server import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve the Indenticat cat identification API and upload page",
        epilog="Gemini settings come from the JSON file and INDENTICAT_* variables; "
               "the API key is read from the variable named by gemini.api_key_env.",
    )
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="JSON settings file; ignored when it does not exist",
    )
    parser.add_argument("--host", default=None, help="Interface to bind instead of server.host")
    parser.add_argument("--port", type=int, default=None, help="Port to bind instead of server.port")
    return parser


def build_classifier(cfg: AppConfig) -> GeminiEmsClassifier:
    key = os.environ.get(cfg.gemini.api_key_env)
    if not key:
        logger.error(
            "Environment variable %s must be set for the Gemini classifier",
            cfg.gemini.api_key_env,
        )
        sys.exit(1)
    return GeminiEmsClassifier(
        api_key=key,
        model=cfg.gemini.model,
        base_url=cfg.gemini.base_url,
        stream=cfg.gemini.stream,
        timeout=cfg.gemini.timeout,
    )


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s"
        )
    args = build_parser().parse_args(argv)

    config_path = Path(args.config)
    try:
        cfg = load_config(config_path if config_path.exists() else None)
    except ValueError as exc:
        logger.error("Failed to load configuration: %s", exc)
        sys.exit(1)
    if not config_path.exists():
        logger.info("Configuration file %s not found; using defaults", config_path)

    if args.host:
        cfg.server.host = args.host
    if args.port:
        cfg.server.port = args.port

    logger.info("Server configuration: %s:%d", cfg.server.host, cfg.server.port)
    logger.info(
        "Gemini model=%s stream=%s timeout=%s",
        cfg.gemini.model,
        cfg.gemini.stream,
        cfg.gemini.timeout,
    )

    app = create_app(classifier=build_classifier(cfg))
    uvicorn.run(app, host=cfg.server.host, port=cfg.server.port, log_level="info")


if __name__ == "__main__":
    main()
