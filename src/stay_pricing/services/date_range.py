"""Format and ordering checks for requested stay dates."""

import datetime as dt
import re
from typing import Any

from stay_pricing.config import PricingConfig
from stay_pricing.models import ErrorCode, PricingError, PricingResult

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
MONTH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")


def parse_date(value: Any, field: str = "date") -> dt.date:
    """Parse a canonical YYYY-MM-DD string into a date.

    Raises:
        PricingError: MALFORMED_DATE if the pattern does not match or the
            date does not exist (e.g., 2025-02-30)
    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise PricingError(ErrorCode.MALFORMED_DATE, details={field: str(value)})
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise PricingError(ErrorCode.MALFORMED_DATE, details={field: value}) from None


def parse_month(value: Any) -> tuple[int, int]:
    """Parse a YYYY-MM string into (year, month)."""
    if not isinstance(value, str) or not MONTH_PATTERN.fullmatch(value):
        raise PricingError(ErrorCode.MALFORMED_DATE, details={"month": str(value)})
    year, month = map(int, value.split("-"))
    if not 1 <= month <= 12 or year < dt.MINYEAR:
        raise PricingError(ErrorCode.MALFORMED_DATE, details={"month": value})
    return year, month


class DateRangeValidator:
    """Validates check-in/check-out strings for a quote request."""

    def __init__(self, config: PricingConfig) -> None:
        """Initialize validator.

        Args:
            config: Engine configuration (for the optional stay cap)
        """
        self.config = config

    def check(self, check_in: Any, check_out: Any) -> tuple[dt.date, dt.date]:
        """Validate and parse a range, raising on failure.

        Check-out must be strictly after check-in; a zero-night stay is
        rejected.

        Raises:
            PricingError: MALFORMED_DATE, INVERTED_RANGE or STAY_TOO_LONG
        """
        start = parse_date(check_in, "check_in")
        end = parse_date(check_out, "check_out")

        if end <= start:
            raise PricingError(
                ErrorCode.INVERTED_RANGE,
                details={"check_in": check_in, "check_out": check_out},
            )

        nights = (end - start).days
        max_nights = self.config.max_stay_nights
        if max_nights is not None and nights > max_nights:
            raise PricingError(
                ErrorCode.STAY_TOO_LONG,
                details={"nights": str(nights), "max_stay_nights": str(max_nights)},
            )

        return start, end

    def validate(self, check_in: Any, check_out: Any) -> PricingResult[tuple[dt.date, dt.date]]:
        """Validate a range without raising.

        Returns:
            PricingResult holding (check_in, check_out) dates or the ToolError
        """
        try:
            return PricingResult[tuple[dt.date, dt.date]].ok(self.check(check_in, check_out))
        except PricingError as exc:
            return PricingResult[tuple[dt.date, dt.date]].fail(exc)
