"""Gateway error taxonomy.

Every failure a handler can produce is one of these; ``main.py`` turns them
into ``{"detail": message}`` responses with the class's status code.
"""


class GatewayError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(GatewayError):
    """Malformed identifier or query argument"""

    status_code = 400


class NotFoundError(GatewayError):
    status_code = 404


class ProductNotFoundError(NotFoundError):
    """The catalog has no such product (or it has no purchasable variant)"""

    def __init__(self, product_id: int, message: str = "Product not found."):
        super().__init__(message)
        self.product_id = product_id


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: int):
        super().__init__("Order not found.")
        self.order_id = order_id


class PriceRuleNotFoundError(NotFoundError):
    def __init__(self, price_rule_id: int):
        super().__init__("Price rule not found.")
        self.price_rule_id = price_rule_id


class CartLineNotFoundError(NotFoundError):
    """No line with this id in the caller's cart"""

    def __init__(self, item_id: int):
        super().__init__("Item not found in cart.")
        self.item_id = item_id


class OutOfStockError(GatewayError):
    status_code = 400

    def __init__(self, product_id: int):
        super().__init__("Product is out of stock.")
        self.product_id = product_id


class InsufficientStockError(GatewayError):
    status_code = 400

    def __init__(self, variant_id: int, available: int):
        super().__init__("Not enough stock available.")
        self.variant_id = variant_id
        self.available = available


class UpstreamUnavailableError(GatewayError):
    """Upstream service unreachable, timed out or answered with an error"""

    status_code = 503

    def __init__(self, message: str = "Service is currently unavailable, please try again later."):
        super().__init__(message)
