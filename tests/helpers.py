"""Cookie helpers for route tests."""
from __future__ import annotations

import json
from http.cookies import SimpleCookie
from typing import Any

import httpx


def cart_cookie(value: Any) -> dict[str, str]:
    """Request headers carrying a cart cookie, as a browser would send it."""
    raw = value if isinstance(value, str) else json.dumps(value, separators=(",", ":"))
    return {"Cookie": f"Cart={raw}"}


def stored_cart(response: httpx.Response) -> Any:
    """Decode the cart cookie written by a response."""
    cookie = SimpleCookie()
    cookie.load(response.headers["set-cookie"])
    return json.loads(cookie["Cart"].value)
