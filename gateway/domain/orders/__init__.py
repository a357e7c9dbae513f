"""Order domain - order lookup and search"""

from .router import router

__all__ = ["router"]
