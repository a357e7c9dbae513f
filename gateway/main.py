import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import ALLOWED_ORIGINS, SECURITY_HEADERS_ENABLED, get_upstream_config
from .domain.cart import proxy_router as proxy_cart_router
from .domain.cart import router as cart_router
from .domain.checkout import router as checkout_router
from .domain.orders import router as orders_router
from .domain.products import router as products_router
from .domain.promos import router as promos_router
from .exceptions import GatewayError, InvalidArgumentError
from .security_headers import SecurityHeadersMiddleware
from .services.draft_order_service import DraftOrderService
from .services.order_service import OrderService
from .services.product_catalog import ProductCatalog
from .services.promo_service import PromoService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Gateway starting up...")
    upstream_config = get_upstream_config()

    # One pooled client for the whole process
    http_client = httpx.AsyncClient(timeout=upstream_config.timeout)
    app.state.product_catalog = ProductCatalog(http_client, upstream_config)
    app.state.order_service = OrderService(http_client, upstream_config)
    app.state.draft_order_service = DraftOrderService(http_client, upstream_config)
    app.state.promo_service = PromoService(http_client, upstream_config)
    logger.info(f"Upstream Shopify service: {upstream_config.base_url}")

    try:
        yield
    finally:
        await http_client.aclose()
        logger.info("Gateway shutting down...")


app = FastAPI(title="Shop API Gateway", version="1.0.0", lifespan=lifespan)


@app.exception_handler(GatewayError)
async def gateway_exception_handler(request: Request, exc: GatewayError):
    """Map domain errors to {"detail": message}; no cart cookie is written on failure"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc.status_code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} - {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Malformed query or path values are client errors like any other bad id:
    400 with a short message instead of FastAPI's 422 error list
    """
    errors = exc.errors()
    message = "Invalid request."
    if errors:
        first = errors[0]
        loc = first.get("loc") or ("request",)
        message = f"Invalid {loc[-1]}: {first.get('msg', 'invalid value')}"
    logger.warning(f"Validation error for {request.url.path}: {errors}")
    return JSONResponse(
        status_code=InvalidArgumentError.status_code, content={"detail": message}
    )


if SECURITY_HEADERS_ENABLED:
    app.add_middleware(
        SecurityHeadersMiddleware, exclude_paths=["/health", "/docs", "/openapi.json"]
    )
    logger.info("Security headers enabled")
else:
    logger.warning("Security headers DISABLED - only use in development!")

logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,  # Cart cookie travels with credentials
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(cart_router)
app.include_router(proxy_cart_router)
app.include_router(products_router)
app.include_router(orders_router)
app.include_router(promos_router)
app.include_router(checkout_router)


@app.get("/")
def root():
    return {"message": "Shop API Gateway is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
