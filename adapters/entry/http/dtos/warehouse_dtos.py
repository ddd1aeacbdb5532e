from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class WarehouseRequestDTO(BaseModel):
    """
    Request DTO for /get_nearest_warehouses.

    Both coordinates must be JSON strings; numbers are rejected.
    """

    latitude: StrictStr = Field(..., min_length=1, description='e.g. "18.52"')
    longitude: StrictStr = Field(..., min_length=1, description='e.g. "73.85"')

    model_config = ConfigDict(frozen=True)
