from __future__ import annotations

from .server import create_app
from .service import IdentificationService

__all__ = ["IdentificationService", "create_app"]
