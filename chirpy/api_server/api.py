"""
FastAPI router: GET /api/healthz, POST /api/validate_chirp.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from chirpy.api_server.dependencies import get_chirp_validator
from chirpy.api_server.responses import respond_with_json
from chirpy.chirpy_logging import get_logger
from chirpy.moderation import ChirpValidator, CleanedChirp

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["API"])


@router.api_route("/healthz", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def healthz() -> PlainTextResponse:
    """Readiness probe: always 200 "OK"."""
    return PlainTextResponse("OK", status_code=200)


@router.post("/validate_chirp", response_model=CleanedChirp)
async def validate_chirp(
    request: Request,
    validator: ChirpValidator = Depends(get_chirp_validator),
) -> Response:
    """
    Validate a chirp and mask banned words.

    Body: {"body": string}. Returns 200 {"cleaned_body": ...}; 400 when longer
    than the limit; 500 when the body is not {"body": string}.
    """
    raw = await request.body()
    cleaned = validator.validate(raw)
    return respond_with_json(200, cleaned)
