import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from adapters.entry.http.error_handlers import register_error_handlers
from adapters.entry.http.relay_router import router as relay_router
from adapters.external.hasura.hasura_http_client import HasuraHttpClient
from config.settings import settings


def _setup_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    _setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting %s (lifespan startup)...", settings.APP_NAME)

    settings.require_backend()
    client = HasuraHttpClient(
        endpoint=settings.HASURA_URL,
        admin_secret=settings.HASURA_ADMIN_SECRET,
        timeout_s=settings.HASURA_TIMEOUT_S,
    )
    app.state.graphql_backend = client

    try:
        yield
    finally:
        logger.info("Shutting down %s (lifespan shutdown)...", settings.APP_NAME)
        await client.aclose()
        app.state.graphql_backend = None


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
app.include_router(relay_router)
register_error_handlers(app)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
