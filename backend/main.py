"""
Resume Diff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff
from services.config_manager import ConfigManager

logger = logging.getLogger("resume_diff.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    logging.basicConfig(
        level=config_manager.log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting Resume Diff Backend...")
    logger.info(
        "ConfigManager initialized from %s (maxLcsCells=%d)",
        config_manager.config_file,
        config_manager.max_lcs_cells(),
    )

    yield
    logger.info("Shutting down Resume Diff Backend...")


app = FastAPI(
    title="Resume Diff Backend",
    description="Word-level comparison of tailored resume versions",
    version="1.0.0",
    lifespan=lifespan,
)

# The comparison dialog calls this service from the browser
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "resume-diff"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))
