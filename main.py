"""
Circle Thumbnail Studio - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

# Add project directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402

# Import routers  # noqa: E402
from api.routers import export, image, session, system  # noqa: E402

# Import configuration  # noqa: E402
from config import get_settings  # noqa: E402

# Import core components  # noqa: E402
from core.image_loader import ImageLoader  # noqa: E402
from core.session_manager import SessionManager  # noqa: E402
from core.thumbnail_store import ThumbnailStore  # noqa: E402

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)

BASE_DIR = Path(__file__).parent
STATIC_DIR = BASE_DIR / settings.storage.static_dir
THUMBNAILS_DIR = BASE_DIR / settings.storage.thumbnails_dir


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    # Startup
    logger.info("Starting Circle Thumbnail Studio server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    session_manager = SessionManager(max_sessions=settings.session.max_sessions)
    thumbnail_store = ThumbnailStore(storage_path=str(THUMBNAILS_DIR))
    image_loader = ImageLoader(
        url_timeout_s=settings.loader.url_timeout_s,
        max_download_mb=settings.loader.max_download_mb,
    )

    logger.info("All managers initialized successfully")

    # Store managers in app state for access by routers
    app.state.session_manager = session_manager
    app.state.thumbnail_store = thumbnail_store
    app.state.image_loader = image_loader
    app.state.config = settings.to_dict()
    app.state.debug = settings.system.debug

    yield

    # Shutdown
    logger.info("Shutting down Circle Thumbnail Studio server...")
    session_manager.clear()
    image_loader.http.close()
    logger.info("Server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Circle Thumbnail Studio",
    description="Select a circular region of an image and export it as a square thumbnail",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(session.router, prefix="/api/session", tags=["Session"])
app.include_router(export.router, prefix="/api/export", tags=["Export"])
app.include_router(system.router, prefix="/api/system", tags=["System"])
app.include_router(image.router, tags=["Image"])

# Static UI and stored thumbnails
app.mount("/static", StaticFiles(directory=str(STATIC_DIR), check_dir=False), name="static")
app.mount(
    "/thumbnails",
    StaticFiles(directory=str(THUMBNAILS_DIR), check_dir=False),
    name="thumbnails",
)


# Root endpoint
@app.get("/", include_in_schema=False)
async def root():
    index_file = STATIC_DIR / "index.html"
    if index_file.exists():
        return FileResponse(index_file)
    return {
        "name": "Circle Thumbnail Studio",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "session": "/api/session",
            "export": "/api/export",
            "system": "/api/system",
            "save_image": "/save-image",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "session_manager": getattr(app.state, "session_manager", None) is not None,
            "thumbnail_store": getattr(app.state, "thumbnail_store", None) is not None,
            "image_loader": getattr(app.state, "image_loader", None) is not None,
        },
    }


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": f"Internal server error: {str(exc)}"},
    )


def run() -> None:
    """Run the server with uvicorn"""
    reload_excludes = (
        ["*.log", "*.pyc", "__pycache__", ".git", ".venv", "venv", "thumbnails/*"]
        if settings.system.debug
        else None
    )

    server_config = uvicorn.Config(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        reload_excludes=reload_excludes,
        log_level=settings.system.log_level.lower(),
        loop="asyncio",
    )
    server = uvicorn.Server(server_config)

    logger.info(f"Open your browser and navigate to http://localhost:{settings.api.port}")
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        logger.info("Server exiting...")


if __name__ == "__main__":
    run()
