"""
Goal Report Service - FastAPI Application

This is the entry point for the backend. It:
1. Creates the FastAPI app instance
2. Configures logging and CORS
3. Registers route handlers
4. Sets up startup/shutdown lifecycle events

Run with:
    uvicorn goal_report.main:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from goal_report.config import settings
from goal_report.routers import reports

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic.

    Code before 'yield' runs on startup.
    Code after 'yield' runs on shutdown.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Starting Goal Report Service (%s, %s pages, %s footers)",
        settings.APP_ENV, settings.REPORT_PAGE_SIZE, settings.REPORT_FOOTER_TIMING,
    )

    yield  # App is running, handling requests

    logger.info("Shutting down")


app = FastAPI(
    title="Goal Report Service",
    description="Renders goal achievement reports as paginated PDFs",
    version="1.0.0",
    lifespan=lifespan,
)

# --- CORS Middleware ---
# Browsers block cross-origin downloads unless the frontend origin is allowed.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

app.include_router(reports.router)


# --- Health Check Endpoints ---

@app.get("/", tags=["health"])
async def root():
    """Root endpoint - confirms the API is alive."""
    return {
        "service": "Goal Report Service",
        "status": "running",
        "version": "1.0.0",
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check for load balancers and monitoring."""
    return {
        "status": "healthy",
        "environment": settings.APP_ENV,
        "footer_timing": settings.REPORT_FOOTER_TIMING,
    }
