import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()

# Shopify-backed product/order service
SHOPIFY_API_BASE_URL = os.getenv("SHOPIFY_API_BASE_URL", "http://localhost:5106")
# Applies to every upstream call; there are no retries
UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

# Cart cookie (client-held, rewritten wholesale on every mutation)
CART_COOKIE_NAME = "Cart"
CART_COOKIE_MAX_AGE = 7 * 24 * 60 * 60

# Frontend origins allowed to call the gateway with credentials
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"


class UpstreamConfig(BaseModel):
    """Connection settings handed to each upstream client at construction"""

    base_url: str
    timeout: float = 10.0


def get_upstream_config() -> UpstreamConfig:
    return UpstreamConfig(
        base_url=SHOPIFY_API_BASE_URL.rstrip("/"),
        timeout=UPSTREAM_TIMEOUT_SECONDS,
    )
