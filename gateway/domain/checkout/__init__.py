"""Checkout domain - turns the delegated cart into a Shopify draft order"""

from .router import router

__all__ = ["router"]
