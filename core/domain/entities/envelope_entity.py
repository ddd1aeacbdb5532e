from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class EnvelopeEntity(BaseModel):
    """
    Uniform outbound wrapper returned by every relay route.

    - status mirrors the HTTP status code (200, 400 or 500).
    - response is a human readable message.
    - data holds the relayed backend records, empty on any failure.
    """

    status: int
    response: str
    data: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def ok(cls, response: str, data: List[Any]) -> "EnvelopeEntity":
        return cls(status=200, response=response, data=list(data))

    @classmethod
    def bad_request(cls, response: str) -> "EnvelopeEntity":
        return cls(status=400, response=response, data=[])

    @classmethod
    def server_error(cls, response: str) -> "EnvelopeEntity":
        return cls(status=500, response=response, data=[])

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-safe dict for HTTP payloads and logging.
        """
        return self.model_dump(mode="json")
