"""Date-based pricing and availability resolution for rental stays."""

from stay_pricing.config import PricingConfig
from stay_pricing.services import PricingEngine

__all__ = ["PricingConfig", "PricingEngine"]

__version__ = "0.1.0"
