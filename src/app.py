"""Shop FastAPI application.

Web server that drives the checkout synchronously via HTTP. Each request
runs inside the shop domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied.
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from shop.domain import shop

shop.init()

DEFAULT_COUNTRIES = [
    name.strip() for name in os.environ.get("SHOP_COUNTRIES", "United Kingdom,France,Germany").split(",") if name.strip()
]

with shop.domain_context():
    from shop.card_type.card_type import seed_card_types
    from shop.country.country import seed_countries

    seed_card_types()
    seed_countries(DEFAULT_COUNTRIES)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Shop API",
    description="Online shop checkout",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the shop domain context for checkout requests."""
    if request.url.path.startswith("/checkout"):
        with shop.domain_context():
            response = await call_next(request)
        return response
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from shop.api import checkout_router  # noqa: E402

app.include_router(checkout_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": shop.name})
