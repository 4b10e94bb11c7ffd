"""
FastAPI Web Application - Review Polisher API
=============================================

Routes:
    OPTIONS *                 -> CORS preflight
    POST /api/polish-review   -> polish tags into a review, record submission
    GET  /                    -> liveness string
    anything else             -> 404 Not Found

The polish route answers as soon as synthesis finishes. Sink deliveries are
handed to the fan-out coordinator and never awaited by the request.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..application import FanoutCoordinator, build_sinks
from ..domain import Submission, UpstreamError, ValidationError
from ..infrastructure.config import get_settings
from ..infrastructure.llm import ReviewSynthesisService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ── Globals ────────────────────────────────────────────────────────
coordinator: Optional[FanoutCoordinator] = None
synthesis_service: Optional[ReviewSynthesisService] = None

# ── Response constants ─────────────────────────────────────────────
LIVENESS_MESSAGE = "Review polisher is running and ready to polish reviews and record submissions."
SERVICE_UNAVAILABLE_MESSAGE = "服务暂时不可用"
NOT_FOUND_MESSAGE = "Not Found"

ALLOW_ORIGIN_HEADER = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, X-Selected-Tags",
}


# ── Lifespan ───────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    global coordinator, synthesis_service
    settings = get_settings()
    for issue in settings.validate():
        logger.warning(issue)

    synthesis_service = ReviewSynthesisService(settings.synthesis)
    coordinator = FanoutCoordinator(
        build_sinks(settings), max_workers=settings.fanout.max_workers
    )
    logger.info("Review polisher ready")
    yield
    # Let detached deliveries finish before the process exits
    coordinator.shutdown(wait=True)


app = FastAPI(
    title="Review Polisher",
    description="Restaurant review polishing with best-effort submission recording",
    lifespan=lifespan,
)


# ══════════════════════════════════════════════════════════════════
#  CROSS-ORIGIN + ERROR SHAPING
# ══════════════════════════════════════════════════════════════════

@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=PREFLIGHT_HEADERS)

    response = await call_next(request)
    response.headers.update(ALLOW_ORIGIN_HEADER)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and wrong methods on known paths are both plain 404s
    if exc.status_code in (404, 405):
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def _error_response(status_code: int, **body) -> JSONResponse:
    return JSONResponse(body, status_code=status_code)


# ══════════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════════

@app.post("/api/polish-review")
async def polish_review(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        submission = Submission.from_payload(payload)
    except ValidationError as e:
        return _error_response(400, error=str(e))

    try:
        # Detached: returns once deliveries are queued
        coordinator.dispatch(submission)
    except Exception as e:
        logger.exception(f"Failed to dispatch submission to sinks: {e}")

    try:
        result = await run_in_threadpool(synthesis_service.synthesize, submission.review_text)
    except UpstreamError as e:
        logger.error(f"Review synthesis failed: {e}")
        return _error_response(500, error=SERVICE_UNAVAILABLE_MESSAGE, details=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error while polishing review: {e}")
        return _error_response(500, error=SERVICE_UNAVAILABLE_MESSAGE, details=str(e))

    return JSONResponse(result)


@app.get("/")
async def liveness():
    return PlainTextResponse(LIVENESS_MESSAGE)
