"""Shared helpers for the content quality package."""

from .numeric import clamp, percentage, round_half_up, round_int

__all__ = [
    "clamp",
    "percentage",
    "round_half_up",
    "round_int",
]
