"""
Mock Storefront API

A simulated storefront backend for developing and testing the client core:
catalog with variants, delivery zones and cash-on-delivery orders.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import LOG_FORMAT, settings
from .routes import products_router, orders_router, delivery_zones_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Mock Storefront API starting up...")
    yield
    logger.info("Mock Storefront API shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Mock Storefront API",
    description="Simulated scooter storefront backend",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(products_router)
app.include_router(delivery_zones_router)
app.include_router(orders_router)


@app.get("/")
async def home():
    return {
        "message": "Mock Storefront API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "delivery_zones": "/api/delivery-zones",
            "orders": "/api/orders",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "mock-storefront-api"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    uvicorn.run(
        "mock_api.main:app",
        host=settings.mock_api_host,
        port=settings.mock_api_port,
        reload=settings.debug,
    )
