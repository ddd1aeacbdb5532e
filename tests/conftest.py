"""Root conftest — shared fixtures for the relay tests.

Invariants:
    - No test ever reaches a real Hasura endpoint
    - The GraphQL backend dependency is replaced by FakeBackend, which records
      every call so tests can assert how often the backend was contacted
"""

import os

# Ensure tests don't accidentally use a real backend
os.environ.setdefault("HASURA_URL", "http://hasura.test/v1/graphql")
os.environ.setdefault("HASURA_ADMIN_SECRET", "test-admin-secret")

import pytest
from httpx import ASGITransport, AsyncClient

from adapters.entry.http.deps import get_graphql_backend
from core.domain.errors import BackendTransportError
from core.repositories.graphql_backend import GraphQLBackend
from main import app


class FakeBackend(GraphQLBackend):
    """Configurable stand-in for HasuraHttpClient.

    - body: dict returned by query()
    - error: exception raised by query() instead, when set
    - calls: list of {"query", "variables", "operation_name"} for each call
    """

    def __init__(self, body=None, error=None):
        self.body = body if body is not None else {"data": {}}
        self.error = error
        self.calls = []

    async def query(self, *, query, variables=None, operation_name=None):
        self.calls.append({"query": query, "variables": variables, "operation_name": operation_name})
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def transport_error():
    return BackendTransportError("ConnectError: connection refused")


@pytest.fixture
async def client(fake_backend):
    """FastAPI test client with the GraphQL backend overridden."""
    app.dependency_overrides[get_graphql_backend] = lambda: fake_backend

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
