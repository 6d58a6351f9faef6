from __future__ import annotations

import argparse
import mimetypes
import sys
from dataclasses import dataclass, field
from pathlib import Path

import requests

from ..ai.types import DEFAULT_CONTENT_TYPE, ClassificationResult, ImageUpload

NO_RESULT_MESSAGE = "No cat detected or unable to identify."


@dataclass
class IndenticatHttpClient:
    base_url: str
    timeout: float = 60.0
    session: requests.Session = field(default_factory=requests.Session)

    def identify(self, image: ImageUpload) -> ClassificationResult:
        files = {
            "image": (
                image.filename or "image",
                image.data,
                image.content_type or DEFAULT_CONTENT_TYPE,
            )
        }
        try:
            response = self.session.post(
                f"{self.base_url.rstrip('/')}/api/identify",
                files=files,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:  # pragma: no cover - network conditions
            raise RuntimeError("Timed out waiting for identification response") from exc
        except requests.RequestException as exc:  # pragma: no cover - network conditions
            raise RuntimeError(f"Failed to call Indenticat API: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise RuntimeError(
                f"Indenticat API returned status {response.status_code} without JSON"
            ) from exc
        if not response.ok:
            error = data.get("error") if isinstance(data, dict) else None
            raise RuntimeError(error or f"Indenticat API returned status {response.status_code}")
        if not isinstance(data, dict):
            raise RuntimeError(
                f"Indenticat API returned status {response.status_code} with an unexpected body"
            )

        message = data.get("message")
        return ClassificationResult(
            ems_code=data.get("emsCode") or None,
            detected=bool(data.get("detected", False)),
            message=str(message) if message is not None else None,
            confidence=_read_percentage(data.get("confidence", 0)),
        )

    def identify_file(self, path: Path) -> ClassificationResult:
        content_type, _ = mimetypes.guess_type(path.name)
        return self.identify(
            ImageUpload(
                data=path.read_bytes(),
                content_type=content_type or DEFAULT_CONTENT_TYPE,
                filename=path.name,
            )
        )


def _read_percentage(value: object) -> int:
    """Read the server's confidence, which is already an integer percentage."""
    try:
        percentage = int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, min(100, percentage))


def format_result(result: ClassificationResult) -> str:
    if result.ems_code:
        lines = [f"EMS Code: {result.ems_code}"]
        if result.message:
            lines.append(result.message)
        lines.append(f"Confidence: {result.confidence}%")
        return "\n".join(lines)
    return result.message or NO_RESULT_MESSAGE


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Identify a cat photo with a running Indenticat server")
    parser.add_argument("image", type=Path, help="Path to the cat photograph")
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:8000",
        help="Base URL of the Indenticat server (default: http://127.0.0.1:8000)",
    )
    args = parser.parse_args(argv)

    if not args.image.is_file():
        print(f"Image not found: {args.image}", file=sys.stderr)
        return 2
    client = IndenticatHttpClient(base_url=args.url)
    try:
        result = client.identify_file(args.image)
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(format_result(result))
    return 0


__all__ = ["IndenticatHttpClient", "format_result", "main"]


if __name__ == "__main__":
    sys.exit(main())
