from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class GraphQLBackend(ABC):
    """
    Abstraction over the GraphQL data service the relay forwards to.

    Implementations return the parsed JSON body, which may itself carry an
    `errors` list, and raise BackendTransportError when no usable body exists.
    """

    @abstractmethod
    async def query(
        self,
        *,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        raise NotImplementedError
