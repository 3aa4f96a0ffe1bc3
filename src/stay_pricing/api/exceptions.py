"""FastAPI exception handlers for converting PricingError to HTTP responses.

The ErrorCode-to-HTTP status mapping:
- 400 Bad Request: caller-fixable validation errors
- 500 Internal Server Error: PROFILE_INVALID, a contract violation in the
  calling code rather than bad user input

Usage:
    from stay_pricing.api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from stay_pricing.models import ErrorCode, PricingError
from stay_pricing.utils.logging import get_logger

logger = get_logger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Date validation -> 400
    ErrorCode.MALFORMED_DATE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVERTED_RANGE: HTTP_400_BAD_REQUEST,
    ErrorCode.STAY_TOO_LONG: HTTP_400_BAD_REQUEST,
    # Price rule validation -> 400
    ErrorCode.INVALID_BEST_DEAL: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PEAK_SEASON: HTTP_400_BAD_REQUEST,
    ErrorCode.NON_POSITIVE_PRICE: HTTP_400_BAD_REQUEST,
    # Contract violation -> 500
    ErrorCode.PROFILE_INVALID: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, defaulting to 400."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
    """Handle PricingError exceptions and convert to a ToolError JSON response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The PricingError exception

    Returns:
        JSONResponse with error details and appropriate status code.
    """
    status_code = get_http_status_for_error(exc.code)
    if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Pricing contract violation: %s", exc.code.value)

    return JSONResponse(
        status_code=status_code,
        content=exc.to_tool_error().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(PricingError, pricing_error_handler)  # type: ignore[arg-type]
