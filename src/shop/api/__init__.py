"""Shop domain API package."""

from shop.api.routes import checkout_router

__all__ = ["checkout_router"]
