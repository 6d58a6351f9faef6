"""Configuration loading for the Indenticat server.

Settings come from an optional JSON file (``config/indenticat.json``) with
environment variables layered on top. The Gemini API key itself is never
stored in the file; only the name of the environment variable holding it.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/indenticat.json")


@dataclass
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class GeminiSettings:
    api_key_env: str = "GEMINI_API_KEY"
    model: str = "gemini-2.0-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    stream: bool = True
    timeout: float | None = None


@dataclass
class AppConfig:
    server: ServerSettings = field(default_factory=ServerSettings)
    gemini: GeminiSettings = field(default_factory=GeminiSettings)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "AppConfig":
        server_data = payload.get("server") if isinstance(payload, Mapping) else None
        gemini_data = payload.get("gemini") if isinstance(payload, Mapping) else None
        if not isinstance(server_data, Mapping):
            server_data = {}
        if not isinstance(gemini_data, Mapping):
            gemini_data = {}

        server_defaults = ServerSettings()
        gemini_defaults = GeminiSettings()
        server = ServerSettings(
            host=str(server_data.get("host") or server_defaults.host),
            port=_sanitize_port(server_data.get("port"), server_defaults.port),
        )
        gemini = GeminiSettings(
            api_key_env=str(gemini_data.get("api_key_env") or gemini_defaults.api_key_env),
            model=str(gemini_data.get("model") or gemini_defaults.model),
            base_url=str(gemini_data.get("base_url") or gemini_defaults.base_url),
            stream=bool(gemini_data.get("stream", gemini_defaults.stream)),
            timeout=_sanitize_timeout(gemini_data.get("timeout")),
        )
        return cls(server=server, gemini=gemini)


def _sanitize_port(value: object, default: int) -> int:
    if value is None:
        return default
    try:
        port = int(value)
    except (TypeError, ValueError):
        return default
    if not 0 < port < 65536:
        return default
    return port


def _sanitize_timeout(value: object) -> float | None:
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return None
    return timeout if timeout > 0 else None


def apply_env_overrides(cfg: AppConfig, environ: Mapping[str, str] | None = None) -> AppConfig:
    env = os.environ if environ is None else environ
    model = env.get("INDENTICAT_GEMINI_MODEL")
    if model:
        cfg.gemini.model = model
    host = env.get("INDENTICAT_HOST")
    if host:
        cfg.server.host = host
    port = env.get("INDENTICAT_PORT")
    if port:
        cfg.server.port = _sanitize_port(port, cfg.server.port)
    return cfg


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load configuration from ``path`` (if given) plus environment overrides.

    Raises FileNotFoundError when an explicit path does not exist and
    ValueError when the file is not valid JSON.
    """
    if path is None:
        cfg = AppConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(config_path)
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {config_path}: {exc}") from exc
        cfg = AppConfig.from_dict(data)
        logger.debug("Loaded configuration from %s", config_path)
    return apply_env_overrides(cfg, environ)


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "GeminiSettings",
    "ServerSettings",
    "apply_env_overrides",
    "load_config",
]
