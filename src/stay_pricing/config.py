"""Engine configuration.

Components receive a PricingConfig through their constructors and never
read the environment themselves. Only the HTTP layer builds one from
environment variables via PricingConfig.from_env().
"""

import os
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "PRICING_"


class PricingConfig(BaseModel):
    """Explicit settings for the pricing engine."""

    model_config = ConfigDict(frozen=True)

    currency: str = Field(default="EUR", min_length=3, max_length=3)
    best_deal_ratio: float = Field(default=0.80, gt=0, lt=1, allow_inf_nan=False)
    peak_season_ratio: float = Field(default=1.40, gt=1, allow_inf_nan=False)
    # None disables the cap
    max_stay_nights: Optional[int] = Field(default=None, ge=1)
    alternative_search_days: int = Field(default=14, ge=1)
    max_alternatives: int = Field(default=3, ge=1)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PricingConfig":
        """Build config from PRICING_* environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            PricingConfig with unset fields left at their defaults
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls.model_validate(values)
