from __future__ import annotations

import logging

from core.domain.entities.envelope_entity import EnvelopeEntity
from core.domain.errors import BackendTransportError
from core.repositories.graphql_backend import GraphQLBackend
from core.services.coordinate_service import Coordinate
from core.services.query_builder_service import HasuraQueryBuilder
from core.services.response_normalizer_service import ResponseNormalizer


class GetNearestWarehousesUseCase:
    """
    Looks up warehouses registered at a latitude/longitude pair.
    """

    def __init__(self, *, backend: GraphQLBackend, logger: logging.Logger | None = None) -> None:
        self._backend = backend
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._normalizer = ResponseNormalizer(
            result_key=HasuraQueryBuilder.WAREHOUSE_RESULT_KEY,
            success_message="Nearest Warehouse information retrieved successfully",
            graphql_error_message="Error fetching warehouses from Hasura",
            transport_error_message="Internal Server Error",
        )

    async def execute(self, *, latitude: Coordinate, longitude: Coordinate) -> EnvelopeEntity:
        req = HasuraQueryBuilder.nearest_warehouses(latitude=latitude, longitude=longitude)
        self._logger.info("Fetching warehouses near (%s, %s)", req.variables["latitude"], req.variables["longitude"])

        try:
            body = await self._backend.query(
                query=req.query,
                variables=req.variables,
                operation_name=req.operation_name,
            )
        except BackendTransportError as exc:
            return self._normalizer.from_transport_error(exc)

        return self._normalizer.from_body(body)
