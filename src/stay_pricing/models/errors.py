"""Standard error codes for the pricing engine.

Every caller-facing failure kind has exactly one code, one message and one
recovery hint, so request handlers can map them to distinct user messages.
Sold-out nights are not errors and have no code here.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes."""

    # Date range validation (ERR_DATE_001-ERR_DATE_003)
    MALFORMED_DATE = "ERR_DATE_001"
    INVERTED_RANGE = "ERR_DATE_002"
    STAY_TOO_LONG = "ERR_DATE_003"

    # Price rule validation (ERR_PRICE_001-ERR_PRICE_003)
    INVALID_BEST_DEAL = "ERR_PRICE_001"
    INVALID_PEAK_SEASON = "ERR_PRICE_002"
    NON_POSITIVE_PRICE = "ERR_PRICE_003"

    # Precondition violations
    PROFILE_INVALID = "ERR_PRICE_004"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MALFORMED_DATE: "Dates must be real calendar dates in YYYY-MM-DD format",
    ErrorCode.INVERTED_RANGE: "Check-out date must be after check-in date",
    ErrorCode.STAY_TOO_LONG: "The requested stay is longer than allowed",
    ErrorCode.INVALID_BEST_DEAL: "Best deal price must be lower than the base price",
    ErrorCode.INVALID_PEAK_SEASON: "Peak season price must be higher than the base price",
    ErrorCode.NON_POSITIVE_PRICE: "All prices must be greater than zero",
    ErrorCode.PROFILE_INVALID: "Pricing profile has not been validated",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.MALFORMED_DATE: "Send both dates as YYYY-MM-DD, e.g. 2025-06-01",
    ErrorCode.INVERTED_RANGE: "Choose a check-out date at least one night after check-in",
    ErrorCode.STAY_TOO_LONG: "Split the stay into shorter ranges",
    ErrorCode.INVALID_BEST_DEAL: "Lower the best deal price below the base price",
    ErrorCode.INVALID_PEAK_SEASON: "Raise the peak season price above the base price",
    ErrorCode.NON_POSITIVE_PRICE: "Enter a positive amount for every price",
    ErrorCode.PROFILE_INVALID: "Validate the profile with PriceRuleValidator before resolving dates",
}


class ToolError(BaseModel):
    """Standard error response format for engine failures."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ToolError":
        """Create a ToolError from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            A ToolError with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class PricingError(Exception):
    """Exception raised inside pricing components.

    Caught at the engine boundary and converted to a ToolError.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    @classmethod
    def from_tool_error(cls, error: ToolError) -> "PricingError":
        """Rebuild the exception from a ToolError."""
        return cls(error.error_code, error.details)

    def to_tool_error(self) -> ToolError:
        """Convert this exception to a ToolError."""
        return ToolError.from_code(self.code, self.details)


T = TypeVar("T")


class PricingResult(BaseModel, Generic[T]):
    """Outcome of an engine operation: either data or a ToolError."""

    success: bool
    data: Optional[T] = None
    error: Optional[ToolError] = None

    @classmethod
    def ok(cls, data: T) -> "PricingResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, exc: PricingError) -> "PricingResult[T]":
        return cls(success=False, error=exc.to_tool_error())

    def unwrap(self) -> T:
        """Return the data, raising PricingError if the operation failed."""
        if self.success:
            return self.data  # type: ignore[return-value]
        if self.error is None:
            raise RuntimeError("Failed PricingResult carries no error")
        raise PricingError.from_tool_error(self.error)
