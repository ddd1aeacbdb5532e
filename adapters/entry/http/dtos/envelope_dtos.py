from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field


class EnvelopeDTO(BaseModel):
    """
    Response DTO shared by every relay route.
    """

    status: int = Field(..., description="Mirrors the HTTP status code")
    response: str
    data: List[Any] = Field(default_factory=list)
