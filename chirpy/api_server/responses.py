"""
JSON response helpers.

Every JSON body the API writes goes through respond_with_json. A payload that
cannot be serialized is logged and answered with a bare 500.
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from chirpy.chirpy_logging import get_logger

logger = get_logger(__name__)


def respond_with_json(status_code: int, payload: Any) -> Response:
    """Serialize payload (dict or pydantic model) to a JSON response with the given status."""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return JSONResponse(status_code=status_code, content=payload)
    except (TypeError, ValueError) as e:
        logger.error("json_marshal_failed", error=str(e), status_code=status_code)
        return Response(status_code=500)


def respond_with_error(status_code: int, message: str) -> Response:
    """JSON error response: {"error": message}."""
    if status_code >= 500:
        logger.warning("responding_with_5xx_error", status_code=status_code, error=message)
    return respond_with_json(status_code, {"error": message})
