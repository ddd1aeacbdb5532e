from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.domain.entities.envelope_entity import EnvelopeEntity
from core.repositories.graphql_backend import GraphQLBackend
from core.usecases.get_apmc_market_price_use_case import GetApmcMarketPriceUseCase
from core.usecases.get_nearest_warehouses_use_case import GetNearestWarehousesUseCase

from .deps import get_graphql_backend
from .dtos.envelope_dtos import EnvelopeDTO
from .dtos.market_price_dtos import MarketPriceRequestDTO
from .dtos.warehouse_dtos import WarehouseRequestDTO

router = APIRouter(tags=["relay"])

_ENVELOPE_RESPONSES = {
    400: {"model": EnvelopeDTO, "description": "Invalid payload"},
    500: {"model": EnvelopeDTO, "description": "Backend failure"},
}


def _to_response(envelope: EnvelopeEntity) -> JSONResponse:
    """
    The HTTP status code always mirrors envelope.status.
    """
    return JSONResponse(status_code=envelope.status, content=envelope.to_dict())


@router.post("/get_apmc_market_price", response_model=EnvelopeDTO, responses=_ENVELOPE_RESPONSES)
async def get_apmc_market_price(
    dto: MarketPriceRequestDTO,
    backend: GraphQLBackend = Depends(get_graphql_backend),
) -> JSONResponse:
    """
    Relay an APMC mandi price lookup to Hasura.
    """
    uc = GetApmcMarketPriceUseCase(backend=backend)
    envelope = await uc.execute(
        for_date=dto.for_date,
        crops=dto.crops,
        latitude=dto.latitude,
        longitude=dto.longitude,
    )
    return _to_response(envelope)


@router.post("/get_nearest_warehouses", response_model=EnvelopeDTO, responses=_ENVELOPE_RESPONSES)
async def get_nearest_warehouses(
    dto: WarehouseRequestDTO,
    backend: GraphQLBackend = Depends(get_graphql_backend),
) -> JSONResponse:
    """
    Relay a warehouse lookup for a latitude/longitude pair to Hasura.
    """
    uc = GetNearestWarehousesUseCase(backend=backend)
    envelope = await uc.execute(latitude=dto.latitude, longitude=dto.longitude)
    return _to_response(envelope)
