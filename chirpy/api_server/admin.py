"""
FastAPI router: GET /admin/metrics, POST /admin/reset.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from chirpy.api_server.dependencies import get_hit_counter
from chirpy.chirpy_logging import get_logger
from chirpy.metrics import HitCounter

logger = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

METRICS_TEMPLATE = """
<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


def render_metrics(hits: int) -> str:
    return METRICS_TEMPLATE.format(hits=hits)


@router.get("/metrics", response_class=HTMLResponse)
def metrics(counter: HitCounter = Depends(get_hit_counter)) -> HTMLResponse:
    """Admin page showing how many times the file server has been hit."""
    return HTMLResponse(render_metrics(counter.read()), status_code=200)


@router.post("/reset")
def reset(counter: HitCounter = Depends(get_hit_counter)) -> Response:
    """Reset the file server hit counter to zero."""
    counter.reset()
    logger.info("hit_counter_reset")
    return Response(status_code=200)
