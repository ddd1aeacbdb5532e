from __future__ import annotations

import math
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator, model_validator

CoordinateIn = Union[StrictStr, StrictInt, StrictFloat]


class MarketPriceRequestDTO(BaseModel):
    """
    Request DTO for /get_apmc_market_price.

    Notes:
    - crops order is preserved all the way to the GraphQL variables.
    - latitude/longitude are optional; falsy values ("" or 0) count as absent,
      and giving only one of the two is rejected.
    """

    for_date: StrictStr = Field(..., description='Arrival date, e.g. "2024-01-01"')
    crops: List[StrictStr] = Field(..., min_length=1, description='e.g. ["Wheat", "Onion"]')
    latitude: Optional[CoordinateIn] = Field(default=None, description='e.g. "18.52" or 18.52')
    longitude: Optional[CoordinateIn] = Field(default=None, description='e.g. "73.85" or 73.85')

    model_config = ConfigDict(frozen=True)

    @field_validator("for_date")
    @classmethod
    def _require_for_date(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("for_date is required")
        return v

    @field_validator("latitude", "longitude")
    @classmethod
    def _falsy_as_missing(cls, v: Optional[CoordinateIn]) -> Optional[CoordinateIn]:
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("coordinates must be finite numbers")
        return v if v else None

    @model_validator(mode="after")
    def _coordinates_together(self) -> "MarketPriceRequestDTO":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be provided together")
        return self
