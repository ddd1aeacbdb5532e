from __future__ import annotations

from fastapi import Request

from core.repositories.graphql_backend import GraphQLBackend


def get_graphql_backend(request: Request) -> GraphQLBackend:
    """
    Return the backend client created during lifespan startup.
    """
    backend = getattr(request.app.state, "graphql_backend", None)
    if backend is None:
        raise RuntimeError("GraphQL backend not initialized")
    return backend
