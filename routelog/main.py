"""
RouteLog API

FastAPI application for tracing routes and logging workouts.
"""

from contextlib import asynccontextmanager
import logging
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routelog import __version__
from routelog.api.deps import build_session
from routelog.api.v1.router import api_router
from routelog.config import Settings, settings


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings."""
    cfg = cfg or settings

    # === Lifespan ===
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        # Startup
        logger.info("Starting RouteLog API...")
        app.state.session = build_session(cfg)
        result = app.state.session.controller.start()
        if result.ok:
            logger.info(f"Session started with {result.value} workouts")
        else:
            logger.error(f"Session started without persisted workouts: {result.message}")

        yield

        # Shutdown
        logger.info("Shutting down...")

    # === App Creation ===
    app = FastAPI(
        title="RouteLog API",
        description="Trace a route on the map and log it as a run or a hike",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if cfg.debug else None,
        redoc_url="/redoc" if cfg.debug else None,
    )

    # === Middleware ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # === Routes ===
    app.include_router(api_router, prefix="/api/v1")

    # === Health Check ===
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()
