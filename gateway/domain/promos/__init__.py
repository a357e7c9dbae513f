"""Promo domain - read-only price rules and discount codes"""

from .router import router

__all__ = ["router"]
