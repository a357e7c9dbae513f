"""Product domain - catalog browsing and search"""

from .router import router

__all__ = ["router"]
