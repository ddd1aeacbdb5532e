from __future__ import annotations

import logging
from typing import Optional, Sequence

from core.domain.entities.envelope_entity import EnvelopeEntity
from core.domain.errors import BackendTransportError
from core.repositories.graphql_backend import GraphQLBackend
from core.services.coordinate_service import Coordinate
from core.services.query_builder_service import HasuraQueryBuilder
from core.services.response_normalizer_service import ResponseNormalizer


class GetApmcMarketPriceUseCase:
    """
    Looks up APMC mandi prices for a date and a list of crops, optionally
    narrowed to a latitude/longitude pair.

    Exactly one backend call per execution; no retries.
    """

    def __init__(self, *, backend: GraphQLBackend, logger: logging.Logger | None = None) -> None:
        self._backend = backend
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._normalizer = ResponseNormalizer(
            result_key=HasuraQueryBuilder.MANDI_RESULT_KEY,
            success_message="APMC Market information retrieved successfully",
            graphql_error_message="Error fetching APMC Market information",
            transport_error_message="Internal Server Error",
        )

    async def execute(
        self,
        *,
        for_date: str,
        crops: Sequence[str],
        latitude: Optional[Coordinate] = None,
        longitude: Optional[Coordinate] = None,
    ) -> EnvelopeEntity:
        req = HasuraQueryBuilder.market_price(
            for_date=for_date,
            crops=crops,
            latitude=latitude,
            longitude=longitude,
        )
        self._logger.info("Fetching mandi prices for_date=%s crops=%d", for_date, len(req.variables["crops"]))

        try:
            body = await self._backend.query(
                query=req.query,
                variables=req.variables,
                operation_name=req.operation_name,
            )
        except BackendTransportError as exc:
            return self._normalizer.from_transport_error(exc)

        return self._normalizer.from_body(body)
