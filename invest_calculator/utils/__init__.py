"""Shared utilities."""

from .decimal_utils import coerce_decimal, round_half_up, round_rate
from .utils import get_project_root

__all__ = ["coerce_decimal", "round_half_up", "round_rate", "get_project_root"]
