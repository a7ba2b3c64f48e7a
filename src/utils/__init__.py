"""Shared utilities package."""

from .decimal_utils import coerce_decimal, quantize_cents
from .utils import get_project_root

__all__ = ["coerce_decimal", "quantize_cents", "get_project_root"]
