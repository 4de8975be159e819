"""Shared helpers for working with raw token amounts."""

from .scaling import ScalingError, decimalize, div, undecimalize

__all__ = [
    "ScalingError",
    "decimalize",
    "undecimalize",
    "div",
]
