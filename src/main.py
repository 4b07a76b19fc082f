"""Main FastAPI application with hexagonal architecture."""

from __future__ import annotations

import logging
import os
import random
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from combo.config import combo_config_from_env

from . import __version__
from .api.rest.routes import router as combos_router
from .infrastructure.adapters.memory_combo_store import InMemoryComboStore

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: the store and config live for the whole process and are
    # handed to routes through app.state.
    app.state.config = combo_config_from_env()
    app.state.combo_store = InMemoryComboStore()
    app.state.rng = random.Random()
    logger.info(f"Combo API ready, share links point at {app.state.config.base_url}")
    yield
    # Shutdown


app = FastAPI(
    title="Combo Generator API",
    description="Randomized Steve vs. Lucina practice combos with shareable links",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # React dev server
        "http://localhost:5173",  # Vite dev server
        "*",  # Allow all for development
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    published_combos: int


@app.get("/", tags=["meta"])
async def root():
    """API root with information and available endpoints."""
    return {
        "name": "Combo Generator API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "randomize": "GET /api/combos/random",
            "encode": "POST /api/combos/encode",
            "decode": "GET /api/combos/decode?combo=",
            "save": "POST /api/combos",
            "published": "GET /api/combos",
            "user": "GET /api/users/{user_id}/combos",
        },
    }


@app.get("/health", response_model=HealthResponse, tags=["meta"])
async def health_check():
    """Check API health."""
    store = app.state.combo_store
    return HealthResponse(
        status="healthy",
        version=__version__,
        published_combos=len(store.list_published()),
    )


# Include REST routes
app.include_router(combos_router)


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=os.environ.get("COMBO_API_HOST", "127.0.0.1"),
        port=int(os.environ.get("COMBO_API_PORT", "8000")),
    )
