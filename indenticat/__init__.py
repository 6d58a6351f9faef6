"""Indenticat: EMS code identification for cat photographs."""

__version__ = "0.1.0"
