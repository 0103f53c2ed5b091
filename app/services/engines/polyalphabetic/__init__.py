"""Polyalphabetic cipher engines."""

from app.services.engines.polyalphabetic.gronsfeld import GronsfeldEngine

__all__ = [
    "GronsfeldEngine",
]
