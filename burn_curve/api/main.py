"""FastAPI application for the curve quote service.

Note: Rate limiting is intentionally not implemented at the application level.
It should be handled at the infrastructure layer (reverse proxy / load balancer).
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from burn_curve import __version__
from burn_curve.api.endpoints import router
from burn_curve.curve.errors import CurveError
from burn_curve.market.errors import MarketError

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BURN_CURVE_HOST", "0.0.0.0")
PORT = int(os.environ.get("BURN_CURVE_PORT", "8000"))
DEBUG = os.environ.get("BURN_CURVE_DEBUG", "false").lower() in ("true", "1", "yes")

# Quote requests are tiny; anything past 64 KB is not one
MAX_REQUEST_SIZE = 64 * 1024

app = FastAPI(
    title="Burn Curve Quotes",
    description="Integer bonding-curve pricing for a fixed token supply",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(CurveError)
@app.exception_handler(MarketError)
async def engine_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map engine rejections to 400 with the error class name."""
    logger.info(
        "request_rejected",
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=400,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - BURN_CURVE_HOST: Host to bind to (default: 0.0.0.0)
    - BURN_CURVE_PORT: Port to bind to (default: 8000)
    - BURN_CURVE_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "burn_curve.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
