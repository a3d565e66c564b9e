"""Pydantic models for API I/O."""

from .envelope import ErrorEnvelope, SuccessEnvelope
from .layout import LayoutPairResponse, LayoutRequest

__all__ = [
    "ErrorEnvelope",
    "LayoutPairResponse",
    "LayoutRequest",
    "SuccessEnvelope",
]
