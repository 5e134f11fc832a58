"""Utility helpers for pyimfilt."""

from __future__ import annotations

from .param_check import check_byte, check_dimension, check_parameter

__all__ = [
    "check_byte",
    "check_dimension",
    "check_parameter",
]
