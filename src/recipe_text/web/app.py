"""
Recipe Text Web API - FastAPI application.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_text import __version__
from recipe_text.config import configure_logging, settings
from recipe_text.web.recipe_text_routes import router as recipe_text_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup."""
    configure_logging()
    logger.info("Recipe Text starting up...")
    logger.info(f"  Environment: {settings.recipe_text_env}")
    logger.info(f"  Max input chars: {settings.max_input_chars}")
    yield


app = FastAPI(title="Recipe Text", version=__version__, lifespan=lifespan)


# CORS middleware for the app frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipe_text_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
