"""Procedure-style API over the domain services."""

from budgetboard.api.router import ProjectionRouter

__all__ = ["ProjectionRouter"]
