"""
Global exception handlers.

Every failure leaves the service as an envelope:
- RequestValidationError -> 400 naming the offending fields
- Exception (catch-all)  -> 500 without internal detail
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.domain.entities.envelope_entity import EnvelopeEntity

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        envelope = EnvelopeEntity.bad_request(describe_validation_errors(exc.errors()))
        return JSONResponse(status_code=envelope.status, content=envelope.to_dict())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        envelope = EnvelopeEntity.server_error("Internal Server Error")
        return JSONResponse(status_code=envelope.status, content=envelope.to_dict())


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Build a caller-facing message from pydantic error dicts.

    Field-level errors are reported by field name; body-level errors (bad JSON,
    cross-field rules) by their message.
    """
    fields: List[str] = []
    messages: List[str] = []

    for err in errors:
        loc = tuple(err.get("loc") or ())
        if err.get("type") == "json_invalid":
            _append_unique(messages, "body must be valid JSON")
        elif len(loc) <= 1 and err.get("type") == "missing":
            _append_unique(messages, "request body is required")
        elif len(loc) > 1 and isinstance(loc[1], str):
            _append_unique(fields, loc[1])
        else:
            msg = str(err.get("msg") or "invalid body")
            if msg.startswith(_VALUE_ERROR_PREFIX):
                msg = msg[len(_VALUE_ERROR_PREFIX):]
            _append_unique(messages, msg)

    parts: List[str] = []
    if fields:
        parts.append("missing or invalid field(s): " + ", ".join(f"'{f}'" for f in fields))
    parts.extend(messages)
    return "Invalid payload: " + "; ".join(parts or ["invalid body"])


def _append_unique(items: List[str], value: str) -> None:
    if value not in items:
        items.append(value)
