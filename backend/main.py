"""
Text Diff Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Text Diff Backend...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")

    yield
    print("[Backend] Shutting down Text Diff Backend...")


app = FastAPI(
    title="Text Diff Backend",
    description="Line-level diff of two text documents with HTML reports",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "text-diff-backend"}


def run():
    """Run the server with the configured host and port"""
    import uvicorn

    server_cfg = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server_cfg.get("host", "0.0.0.0"), port=server_cfg.get("port", 8000))


if __name__ == "__main__":
    run()
