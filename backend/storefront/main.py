"""
FastAPI application entry point
"""
import os
import asyncio
import logging
from pathlib import Path
from dotenv import load_dotenv

logging.basicConfig(level=logging.INFO)
logging.getLogger("form").setLevel(logging.INFO)
logging.getLogger("products").setLevel(logging.INFO)

# Load environment variables FIRST, before any other imports
# Explicitly look for .env in the backend directory (parent of storefront/)
backend_dir = Path(__file__).parent.parent
env_path = backend_dir / ".env"
load_dotenv(dotenv_path=env_path, override=True)

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from storefront.routes import api, dashboard
from storefront.services.dashboard import Dashboard


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle — start the product load in the background."""
    app.state.dashboard = Dashboard()
    load_task = asyncio.create_task(app.state.dashboard.start())
    yield
    if not load_task.done():
        load_task.cancel()
        await asyncio.gather(load_task, return_exceptions=True)
    await app.state.dashboard.close()


def cors_origins() -> list:
    raw = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Product Listing Dashboard",
    description="Create products and browse the Fake Store catalog",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware - allow a separate frontend to use the JSON API
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(dashboard.router, tags=["dashboard"])
app.include_router(api.router, prefix="/api", tags=["products"])


@app.get("/api")
async def root():
    """API information"""
    return {
        "service": "Product Listing Dashboard",
        "version": "1.0.0",
        "endpoints": {
            "health": "/health",
            "products": "/api/products (GET)",
            "form": "/api/form (GET, PATCH)",
            "image": "/api/form/image (POST)",
            "submit": "/api/form/submit (POST)",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "product-listing-dashboard"}
