from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from core.domain.errors import BackendTransportError
from core.repositories.graphql_backend import GraphQLBackend


class HasuraHttpClient(GraphQLBackend):
    """
    Minimal Hasura GraphQL client.

    Uses POST JSON:
      { "query": "...", "variables": {...}, "operationName": "..." }

    Authorization:
      x-hasura-admin-secret: {admin_secret}

    A 2xx body carrying `errors` is returned untouched; only network failures,
    non-2xx statuses and undecodable bodies raise BackendTransportError.
    """

    def __init__(
        self,
        *,
        endpoint: str,
        admin_secret: str,
        timeout_s: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._endpoint = str(endpoint).strip()
        self._admin_secret = str(admin_secret).strip()
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_s, connect=5.0),
            transport=transport,
        )
        self._logger = logging.getLogger(self.__class__.__name__)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def query(
        self,
        *,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "x-hasura-admin-secret": self._admin_secret,
        }
        payload = {
            "query": query,
            "variables": variables or {},
        }
        if operation_name:
            payload["operationName"] = operation_name

        try:
            r = await self._client.post(self._endpoint, headers=headers, json=payload)
            r.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BackendTransportError(
                f"backend responded with HTTP {exc.response.status_code}",
                body=exc.response.text,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise BackendTransportError(f"{exc.__class__.__name__}: {exc}") from exc

        try:
            data = r.json()
        except ValueError as exc:
            raise BackendTransportError("backend returned a non-JSON body", body=r.text, status_code=r.status_code) from exc

        if not isinstance(data, dict):
            raise BackendTransportError("backend returned an unexpected JSON body", body=r.text, status_code=r.status_code)

        self._logger.debug("Hasura replied %s for %d byte(s)", r.status_code, len(r.content))
        return data
