"""Price rule validation for pricing profiles.

A profile is usable only when best_deal_price < base_price < peak_season_price
and all three are positive. Invalid profiles are rejected, never repaired.
"""

import math
from fractions import Fraction
from typing import Optional, Union

from stay_pricing.config import PricingConfig
from stay_pricing.models import (
    ErrorCode,
    PricingError,
    PricingResult,
    PropertyPricingProfile,
    ValidatedPricingProfile,
)


class PriceRuleValidator:
    """Validates the ordering of a profile's price tiers."""

    def check(self, profile: PropertyPricingProfile) -> ValidatedPricingProfile:
        """Validate a profile, raising on the first violated rule.

        Args:
            profile: Profile to check

        Returns:
            The same prices as a ValidatedPricingProfile

        Raises:
            PricingError: NON_POSITIVE_PRICE, INVALID_BEST_DEAL or INVALID_PEAK_SEASON
        """
        prices = {
            "base_price": profile.base_price,
            "best_deal_price": profile.best_deal_price,
            "peak_season_price": profile.peak_season_price,
        }
        non_positive = [name for name, value in prices.items() if value <= 0]
        if non_positive:
            raise PricingError(
                ErrorCode.NON_POSITIVE_PRICE,
                details={"fields": ",".join(non_positive)},
            )

        if profile.best_deal_price >= profile.base_price:
            raise PricingError(
                ErrorCode.INVALID_BEST_DEAL,
                details={
                    "best_deal_price": str(profile.best_deal_price),
                    "base_price": str(profile.base_price),
                },
            )

        if profile.peak_season_price <= profile.base_price:
            raise PricingError(
                ErrorCode.INVALID_PEAK_SEASON,
                details={
                    "peak_season_price": str(profile.peak_season_price),
                    "base_price": str(profile.base_price),
                },
            )

        if isinstance(profile, ValidatedPricingProfile):
            return profile
        return ValidatedPricingProfile(**prices)

    def validate(self, profile: PropertyPricingProfile) -> PricingResult[ValidatedPricingProfile]:
        """Validate a profile without raising.

        Returns:
            PricingResult holding the validated profile or the ToolError
        """
        try:
            return PricingResult[ValidatedPricingProfile].ok(self.check(profile))
        except PricingError as exc:
            return PricingResult[ValidatedPricingProfile].fail(exc)


def scale_price(price: int, factor: Union[Fraction, float]) -> int:
    """Multiply a price in cents by factor exactly, halves rounding up."""
    return math.floor(price * Fraction(factor) + Fraction(1, 2))


def derive_profile(
    config: PricingConfig,
    base_price: int,
    best_deal_price: Optional[int] = None,
    peak_season_price: Optional[int] = None,
) -> PropertyPricingProfile:
    """Build a profile, filling missing seasonal prices from config ratios.

    Explicit prices are kept as given. The result is not validated.
    """
    if best_deal_price is None:
        best_deal_price = scale_price(base_price, config.best_deal_ratio)
    if peak_season_price is None:
        peak_season_price = scale_price(base_price, config.peak_season_ratio)
    return PropertyPricingProfile(
        base_price=base_price,
        best_deal_price=best_deal_price,
        peak_season_price=peak_season_price,
    )


def nightly_base_price(listing_price: int, listing_nights: int) -> int:
    """Per-night base price of a listing advertised as a multi-night total.

    Halves round up.
    """
    if listing_nights < 1:
        raise ValueError("listing_nights must be at least 1")
    return (listing_price + listing_nights // 2) // listing_nights
