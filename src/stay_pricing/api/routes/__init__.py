"""API routes package.

All routers are registered in main.py with /api prefix.
"""

from stay_pricing.api.routes.pricing import router as pricing_router

__all__ = ["pricing_router"]
