"""Pricing profile models.

All amounts are integers in the property's minor currency unit
(e.g., 15000 = €150.00).
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PropertyPricingProfile(BaseModel):
    """Base nightly price plus the two named seasonal price points.

    Values are not range-checked here; PriceRuleValidator reports
    violations with specific error codes instead.
    """

    base_price: int = Field(..., description="Nightly base price in cents", examples=[10000])
    best_deal_price: int = Field(..., description="Best deal nightly price in cents", examples=[8000])
    peak_season_price: int = Field(
        ..., description="Peak season nightly price in cents", examples=[15000]
    )


class ValidatedPricingProfile(PropertyPricingProfile):
    """A profile that passed PriceRuleValidator.

    Only instances of this class are accepted by CalendarResolver. The
    invariant is re-asserted on construction. model_copy(update=...) and
    model_construct bypass that check, so CalendarResolver re-checks the
    tier order before trusting an instance.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_tier_order(self) -> Self:
        if min(self.base_price, self.best_deal_price, self.peak_season_price) <= 0:
            raise ValueError("all prices must be positive")
        if not self.best_deal_price < self.base_price < self.peak_season_price:
            raise ValueError("best_deal_price < base_price < peak_season_price must hold")
        return self
