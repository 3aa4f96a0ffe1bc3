"""FastAPI application exposing the pricing engine over REST.

The app has no storage of its own: callers send the pricing profile and the
calendar entries with each request.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from mangum import Mangum

from stay_pricing import __version__
from stay_pricing.api.exceptions import register_exception_handlers
from stay_pricing.api.middleware.correlation import CorrelationIdMiddleware
from stay_pricing.api.routes import pricing_router

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

app = FastAPI(
    title="Stay Pricing API",
    description="Pricing and availability resolution for rental stays",
    version=__version__,
)

app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)

app.include_router(pricing_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "stay-pricing",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run("stay_pricing.api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
