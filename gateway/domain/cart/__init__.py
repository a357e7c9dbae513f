"""Cart domain - cookie-held shopping carts"""

from .router import proxy_router, router

__all__ = ["router", "proxy_router"]
