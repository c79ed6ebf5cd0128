"""FastAPI HTTP server setup."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from config import settings

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info(
        f"Starting ChronoPeek server (default runs: {settings.default_run_count}, "
        f"search limit: {settings.search_limit_minutes} minutes)"
    )
    
    yield
    
    logger.info("ChronoPeek server shut down")


# Create FastAPI app
app = FastAPI(
    title="ChronoPeek",
    description="Cron expression parser and next-run preview",
    version=VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import and include routers
from .endpoints import router

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "ChronoPeek",
        "version": VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "search_limit_minutes": settings.search_limit_minutes
    }
