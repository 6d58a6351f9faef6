from __future__ import annotations

import json

import pytest

from indenticat.ai.normalizer import normalize_confidence, normalize_reply


def test_plain_json_reply_is_normalized() -> None:
    text = json.dumps(
        {
            "ems_code": "BRI n 24",
            "detected": True,
            "message": "British Shorthair Black Spotted Tabby",
            "confidence": 0.95,
        }
    )

    result = normalize_reply(text)

    assert result.ems_code == "BRI n 24"
    assert result.detected is True
    assert result.message == "British Shorthair Black Spotted Tabby"
    assert result.confidence == 95


def test_fenced_reply_matches_unwrapped_reply() -> None:
    body = '{"ems_code": "MCO n 03", "detected": true, "message": "Maine Coon bicolor", "confidence": 100}'

    fenced = normalize_reply(f"```json\n{body}\n```")
    plain = normalize_reply(body)

    assert fenced == plain
    assert fenced.ems_code == "MCO n 03"
    assert fenced.confidence == 100


def test_fenced_reply_with_surrounding_prose() -> None:
    text = 'Here is the result:\n```json\n{"ems_code": "SIA a", "detected": true}\n```\nThanks!'

    result = normalize_reply(text)

    assert result.ems_code == "SIA a"
    assert result.detected is True
    assert result.message is None
    assert result.confidence == 0


def test_invalid_json_returns_raw_text() -> None:
    text = "I could not find a cat in this picture."

    result = normalize_reply(text)

    assert result.ems_code is None
    assert result.detected is False
    assert result.confidence == 0
    assert result.message == text


def test_invalid_json_keeps_untrimmed_raw_text() -> None:
    text = "  not json at all \n"

    result = normalize_reply(text)

    assert result.message == text


def test_json_array_is_treated_as_malformed() -> None:
    result = normalize_reply("[1, 2, 3]")

    assert result.detected is False
    assert result.message == "[1, 2, 3]"


def test_missing_fields_use_defaults() -> None:
    result = normalize_reply("{}")

    assert result.ems_code is None
    assert result.detected is False
    assert result.message is None
    assert result.confidence == 0


def test_empty_ems_code_becomes_none() -> None:
    result = normalize_reply('{"ems_code": "", "detected": false, "message": "A dog", "confidence": 80}')

    assert result.ems_code is None
    assert result.message == "A dog"
    assert result.confidence == 80


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0.95, 95),
        (1, 100),
        (1.0, 100),
        (0, 0),
        (100, 100),
        (87.4, 87),
        (87.5, 88),
        (42, 42),
        ("0.5", 50),
        ("high", 0),
        (None, 0),
        (250, 100),
        (-0.3, 0),
        (10**400, 0),
    ],
)
def test_normalize_confidence(raw, expected) -> None:
    assert normalize_confidence(raw) == expected


def test_oversized_confidence_does_not_escape_normalizer() -> None:
    text = '{"ems_code": "BRI n 24", "detected": true, "confidence": 1' + "0" * 400 + "}"

    result = normalize_reply(text)

    assert result.ems_code == "BRI n 24"
    assert result.detected is True
    assert result.confidence == 0
