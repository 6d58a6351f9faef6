from __future__ import annotations

import json

import pytest

from indenticat.api.config_loader import AppConfig, load_config


def test_defaults_without_file() -> None:
    cfg = load_config(None, environ={})

    assert cfg.server.host == "0.0.0.0"
    assert cfg.server.port == 8000
    assert cfg.gemini.api_key_env == "GEMINI_API_KEY"
    assert cfg.gemini.model == "gemini-2.0-flash"
    assert cfg.gemini.stream is True
    assert cfg.gemini.timeout is None


def test_file_values_and_env_overrides(tmp_path) -> None:
    path = tmp_path / "indenticat.json"
    path.write_text(
        json.dumps(
            {
                "server": {"host": "127.0.0.1", "port": 9000},
                "gemini": {"model": "gemini-2.5-flash", "stream": False, "timeout": 20},
            }
        ),
        encoding="utf-8",
    )

    cfg = load_config(path, environ={"INDENTICAT_PORT": "9100"})

    assert cfg.server.host == "127.0.0.1"
    assert cfg.server.port == 9100
    assert cfg.gemini.model == "gemini-2.5-flash"
    assert cfg.gemini.stream is False
    assert cfg.gemini.timeout == 20.0


def test_env_model_override() -> None:
    cfg = load_config(None, environ={"INDENTICAT_GEMINI_MODEL": "gemini-2.5-pro", "INDENTICAT_HOST": "localhost"})

    assert cfg.gemini.model == "gemini-2.5-pro"
    assert cfg.server.host == "localhost"


def test_invalid_values_fall_back_to_defaults() -> None:
    cfg = AppConfig.from_dict(
        {"server": {"port": "not-a-port"}, "gemini": {"timeout": -5, "base_url": ""}}
    )

    assert cfg.server.port == 8000
    assert cfg.gemini.timeout is None
    assert cfg.gemini.base_url == "https://generativelanguage.googleapis.com/v1beta"


def test_missing_explicit_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json", environ={})


def test_malformed_file_raises_value_error(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path, environ={})


def test_default_app_classifier_follows_config_file(tmp_path, monkeypatch) -> None:
    from indenticat.api.server import create_app

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "indenticat.json").write_text(
        json.dumps({"gemini": {"api_key_env": "CAT_KEY", "model": "gemini-2.5-flash", "stream": False}}),
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CAT_KEY", "secret")
    monkeypatch.delenv("INDENTICAT_GEMINI_MODEL", raising=False)

    classifier = create_app().state.classifier

    assert classifier.api_key == "secret"
    assert classifier.model == "gemini-2.5-flash"
    assert classifier.stream is False


def test_cli_parser_overrides() -> None:
    from indenticat.api.main import build_parser

    args = build_parser().parse_args(["--port", "9001", "--host", "127.0.0.1"])

    assert args.port == 9001
    assert args.host == "127.0.0.1"
    assert args.config == "config/indenticat.json"
