"""App wiring — settings, lifespan, health probe and catch-all handler."""

import pytest
from httpx import ASGITransport, AsyncClient

from adapters.entry.http.deps import get_graphql_backend
from adapters.entry.http.error_handlers import describe_validation_errors
from config.settings import Settings
from core.domain.errors import ConfigurationError
from main import app


def test_require_backend_names_missing_variables():
    s = Settings()
    s.HASURA_URL = ""
    s.HASURA_ADMIN_SECRET = "  "

    with pytest.raises(ConfigurationError, match="HASURA_URL, HASURA_ADMIN_SECRET"):
        s.require_backend()


def test_require_backend_accepts_configured_values():
    s = Settings()
    s.HASURA_URL = "http://hasura.test/v1/graphql"
    s.HASURA_ADMIN_SECRET = "secret"

    s.require_backend()


def test_describe_validation_errors():
    errors = [
        {"type": "missing", "loc": ("body", "for_date"), "msg": "Field required"},
        {"type": "too_short", "loc": ("body", "crops"), "msg": "List should have at least 1 item"},
        {"type": "string_type", "loc": ("body", "crops", 0), "msg": "Input should be a valid string"},
    ]

    assert describe_validation_errors(errors) == "Invalid payload: missing or invalid field(s): 'for_date', 'crops'"


def test_describe_body_level_errors():
    errors = [{"type": "value_error", "loc": ("body",), "msg": "Value error, latitude and longitude must be provided together"}]

    assert describe_validation_errors(errors) == "Invalid payload: latitude and longitude must be provided together"


@pytest.mark.asyncio
async def test_healthz(client):
    resp = await client.get("/healthz")

    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_unexpected_error_becomes_500_envelope():
    class _ExplodingBackend:
        async def query(self, *, query, variables=None, operation_name=None):
            raise RuntimeError("unexpected")

    app.dependency_overrides[get_graphql_backend] = lambda: _ExplodingBackend()
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://test",
        ) as c:
            resp = await c.post("/get_nearest_warehouses", json={"latitude": "1", "longitude": "2"})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"status": 500, "response": "Internal Server Error", "data": []}


@pytest.mark.asyncio
async def test_lifespan_opens_and_closes_backend(monkeypatch):
    closed = []

    class _FakeHasura:
        def __init__(self, **kwargs):
            self.kwargs = kwargs

        async def aclose(self):
            closed.append(True)

    monkeypatch.setattr("main.HasuraHttpClient", _FakeHasura)
    monkeypatch.setattr("main.settings.HASURA_URL", "http://hasura.test/v1/graphql")
    monkeypatch.setattr("main.settings.HASURA_ADMIN_SECRET", "secret")
    monkeypatch.setattr("main.settings.HASURA_TIMEOUT_S", 7.5)

    async with app.router.lifespan_context(app):
        backend = app.state.graphql_backend
        assert backend.kwargs["endpoint"] == "http://hasura.test/v1/graphql"
        assert backend.kwargs["admin_secret"] == "secret"
        assert backend.kwargs["timeout_s"] == 7.5

    assert closed == [True]
    assert app.state.graphql_backend is None
