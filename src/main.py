import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

from src.core.config import settings
from src.core.database import Database, database as default_database
from src.core.exceptions import AppException
from src.core.logging_config import configure_logging
from src.core.middleware import RequestLoggingMiddleware
from src.core.response.handlers import app_exception_handler, global_exception_handler
from src.core.services.file_service import FileStorage

# Import routers from apps
from src.apps.board import post_router
from src.apps.board.repositories.post_repository import PostRepository
from src.apps.board.services.post_service import BoardService

logger = logging.getLogger(__name__)


def create_app(
    database: Optional[Database] = None,
    storage: Optional[FileStorage] = None,
) -> FastAPI:
    """Build the application around an explicit database and file store."""
    database = database or default_database
    storage = storage or FileStorage()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: Create database tables
        await database.create_all()
        storage.ensure_directory()
        logger.info(f"Uploads stored in {storage.upload_dir.resolve()}")
        yield
        # Shutdown: Clean up resources if needed
        await database.disconnect()
        logger.info("Shutting down...")

    # Create FastAPI app
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )

    app.state.board_service = BoardService(
        PostRepository(database.get_session), storage
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Adjust in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Add exception handlers
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/board/list")

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "message": "Service is running normally",
            "version": settings.PROJECT_VERSION,
        }

    # Include app routers
    app.include_router(post_router)

    # Uploaded attachments, served at the path stored in Post.filepath
    app.mount(
        settings.FILES_URL_PREFIX,
        StaticFiles(directory=str(storage.upload_dir), check_dir=False),
        name="files",
    )

    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,  # Enable auto-reload in development
        log_level=settings.LOG_LEVEL.lower(),
    )
