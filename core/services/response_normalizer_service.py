from __future__ import annotations

import logging
from typing import Any, Dict, List

from core.domain.entities.envelope_entity import EnvelopeEntity
from core.domain.errors import BackendGraphQLError, BackendTransportError


class ResponseNormalizer:
    """
    Maps backend outcomes into the uniform envelope.

    - transport failure         -> 500, transport_error_message, []
    - GraphQL `errors` present  -> 500, graphql_error_message, []
    - data without result_key   -> 200, success_message, []
    - otherwise                 -> 200, success_message, data[result_key]

    Backend detail is logged here and never copied into the envelope.
    """

    def __init__(
        self,
        *,
        result_key: str,
        success_message: str,
        graphql_error_message: str,
        transport_error_message: str,
    ) -> None:
        self._result_key = result_key
        self._success_message = success_message
        self._graphql_error_message = graphql_error_message
        self._transport_error_message = transport_error_message
        self._logger = logging.getLogger(self.__class__.__name__)

    def from_body(self, body: Dict[str, Any]) -> EnvelopeEntity:
        errors = body.get("errors")
        if errors:
            return self.from_graphql_error(BackendGraphQLError(list(errors) if isinstance(errors, list) else [errors]))

        data = body.get("data") or {}
        result = data.get(self._result_key) if isinstance(data, dict) else None
        return EnvelopeEntity.ok(self._success_message, self._as_records(result))

    def _as_records(self, result: Any) -> List[Any]:
        """
        Records are relayed verbatim: a list as-is, a lone object as a
        one-element list, anything else dropped.
        """
        if result is None:
            return []
        if isinstance(result, list):
            return result
        if isinstance(result, dict):
            return [result]
        self._logger.warning("Unexpected %s result of type %s; returning no records", self._result_key, type(result).__name__)
        return []

    def from_graphql_error(self, exc: BackendGraphQLError) -> EnvelopeEntity:
        self._logger.error("GraphQL returned errors for %s: %s", self._result_key, exc.errors)
        return EnvelopeEntity.server_error(self._graphql_error_message)

    def from_transport_error(self, exc: BackendTransportError) -> EnvelopeEntity:
        self._logger.error("Hasura query error for %s: %s", self._result_key, exc.body or exc.message)
        return EnvelopeEntity.server_error(self._transport_error_message)
