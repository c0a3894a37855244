"""
SwingTrace Backend API

Serves the swing analysis engine over HTTP.

Start the server with either of:
    uvicorn swingtrace.main:app --port 8000
    python -m swingtrace.main

Interactive docs are served at /docs and /redoc.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import router as api_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Local frontends allowed to call the API
DEV_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log service start and stop."""
    logger.info(f"SwingTrace API {__version__} ready, docs at /docs")
    yield
    logger.info("SwingTrace API stopped")


app = FastAPI(
    title="SwingTrace API",
    description="""
    **Golf Swing Trajectory & Phase Analysis**

    Submit per-frame pose landmarks and get back trajectories, swing
    phases, tempo, rotation, swing path and key moments.

    - `GET /api/health` - Liveness and version
    - `POST /api/analysis/frames` - Analyze a whole swing (10+ frames)
    - `POST /api/trajectory/analyze` - Plot data for one trajectory
    """,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=DEV_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/", tags=["Root"])
async def root():
    """Service name and where to go next."""
    return {
        "name": "SwingTrace API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("swingtrace.main:app", host="127.0.0.1", port=8000, log_level="info")
