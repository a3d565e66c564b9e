from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class SuccessEnvelope(BaseModel):
    data: Any = None
    success: bool = True


class ErrorEnvelope(BaseModel):
    error: str
    success: bool = False
