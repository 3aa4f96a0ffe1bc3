"""FastAPI dependency injection providers.

The engine is stateless, so a single cached instance serves every request.
This is the only place configuration is read from the environment.

Usage in routes:
    from stay_pricing.api.dependencies import get_pricing_engine

    @router.post("/pricing/quote")
    async def quote(engine: PricingEngine = Depends(get_pricing_engine)):
        ...

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from stay_pricing.config import PricingConfig
from stay_pricing.services.engine import PricingEngine


@lru_cache
def get_pricing_config() -> PricingConfig:
    """Get cached PricingConfig built from PRICING_* environment variables."""
    return PricingConfig.from_env()


@lru_cache
def get_pricing_engine() -> PricingEngine:
    """Get cached PricingEngine instance."""
    return PricingEngine(config=get_pricing_config())


def reset_services() -> None:
    """Clear all cached instances so the next request re-reads config."""
    get_pricing_config.cache_clear()
    get_pricing_engine.cache_clear()
