from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class GraphQLRequestEntity(BaseModel):
    """
    A GraphQL document plus its variables, ready to be posted to the backend.

    Built by HasuraQueryBuilder; never mutated afterwards.
    """

    operation_name: str
    query: str
    variables: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
