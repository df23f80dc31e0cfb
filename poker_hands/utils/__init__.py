"""Utility helpers."""

from .seeding import make_rng

__all__ = ["make_rng"]
