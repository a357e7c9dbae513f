"""
Cart cookie codec.

The cart lives entirely in a client-held cookie. Reads never fail: a missing,
malformed or wrongly shaped cookie is an empty cart. Writes replace the whole
cookie with HttpOnly, Secure, SameSite=Strict and a 7-day lifetime.
"""

import json
import logging
from typing import Any

from fastapi import Request, Response
from pydantic import TypeAdapter, ValidationError

from ...config import CART_COOKIE_MAX_AGE, CART_COOKIE_NAME
from .schemas import CartLine

logger = logging.getLogger(__name__)

_quantities_adapter = TypeAdapter(dict[int, int])
_lines_adapter = TypeAdapter(list[CartLine])


def _read_raw(request: Request) -> Any:
    raw = request.cookies.get(CART_COOKIE_NAME)
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed cart cookie")
        return None


def read_quantities(request: Request) -> dict[int, int]:
    """Cookie cart: productId -> quantity"""
    data = _read_raw(request)
    if not data:
        return {}
    try:
        quantities = _quantities_adapter.validate_python(data)
    except ValidationError:
        logger.warning("Ignoring cart cookie with unexpected shape")
        return {}
    return {
        product_id: qty for product_id, qty in quantities.items() if product_id > 0 and qty > 0
    }


def read_lines(request: Request) -> list[CartLine]:
    """Delegated cart: ordered list of lines"""
    data = _read_raw(request)
    if not data:
        return []
    try:
        lines = _lines_adapter.validate_python(data)
    except ValidationError:
        logger.warning("Ignoring cart cookie with unexpected shape")
        return []
    # One line per variant; the first occurrence wins
    unique: dict[int, CartLine] = {}
    for line in lines:
        if line.quantity > 0 and line.variant_id not in unique:
            unique[line.variant_id] = line
    return list(unique.values())


def quantities_to_json(quantities: dict[int, int]) -> dict[str, int]:
    return {str(product_id): qty for product_id, qty in quantities.items()}


def lines_to_json(lines: list[CartLine]) -> list[dict[str, Any]]:
    return [line.model_dump(mode="json", by_alias=True) for line in lines]


def write_cart(response: Response, payload: Any) -> None:
    """Serialize the full cart into the response cookie"""
    response.set_cookie(
        key=CART_COOKIE_NAME,
        value=json.dumps(payload, separators=(",", ":")),
        httponly=True,
        secure=True,
        samesite="strict",
        max_age=CART_COOKIE_MAX_AGE,
        path="/",
    )
