"""Transposition cipher engines."""

from app.services.engines.transposition.route import RouteCipherEngine

__all__ = [
    "RouteCipherEngine",
]
