import asyncio
import logging
from typing import Optional

import typer
import uvicorn

from src.core.config import settings
from src.core.database import Database
from src.core.logging_config import configure_logging
from src.core.response.schemas import PageRequest
from src.core.services.file_service import FileStorage
from src.apps.board.repositories.post_repository import PostRepository

app = typer.Typer(help="CLI for running and maintaining the board.")
logger = logging.getLogger(__name__)


# ---------------------------
# Helpers
# ---------------------------
def get_database() -> Database:
    return Database(settings.ASYNC_DATABASE_URL)


def get_storage() -> FileStorage:
    return FileStorage(settings.UPLOAD_FOLDER)


@app.callback()
def main(log_level: str = typer.Option(settings.LOG_LEVEL, help="Logging level")):
    configure_logging(log_level)


# ---------------------------
# Commands
# ---------------------------
@app.command()
def init_db():
    """Create the board table and the upload directory."""

    async def _init():
        database = get_database()
        try:
            await database.create_all()
        finally:
            await database.disconnect()

    try:
        asyncio.run(_init())
    except Exception as e:
        print(f"❌ Database initialization failed: {e}")
        raise typer.Exit(1)

    storage = get_storage()
    storage.ensure_directory()
    print("✅ Database tables created successfully.")
    print(f"✅ Upload directory ready at {storage.upload_dir}")


@app.command()
def serve(
    host: str = typer.Option(settings.HOST, help="Host to bind"),
    port: int = typer.Option(settings.PORT, help="Port to bind"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
):
    """Run the web server."""
    print(f"🚀 Board running at http://{host}:{port}/board/list")
    uvicorn.run(
        "src.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


@app.command()
def list_posts(
    page: int = typer.Option(0, min=0, help="Zero-based page index"),
    size: int = typer.Option(settings.PAGE_SIZE, min=1, help="Posts per page"),
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Title search"),
):
    """Print a page of posts, newest first."""

    async def _list():
        database = get_database()
        try:
            repository = PostRepository(database.get_session)
            page_request = PageRequest(page=page, size=size)
            if keyword:
                return await repository.search_by_title_page(keyword, page_request)
            return await repository.list_page(page_request)
        finally:
            await database.disconnect()

    result = asyncio.run(_list())

    if result.is_empty:
        print("📁 No posts found.")
        return

    print(
        f"📄 Page {result.page + 1}/{result.total_pages} "
        f"({result.total_elements} posts)"
    )
    for post in result.items:
        attachment = f"  📎 {post.filename}" if post.filename else ""
        print(f"  #{post.id}  {post.title}{attachment}")


@app.command()
def purge_orphans(
    dry_run: bool = typer.Option(False, "--dry-run", help="Only list the files"),
):
    """Delete uploaded files that no post references any more."""

    async def _referenced() -> set:
        database = get_database()
        try:
            repository = PostRepository(database.get_session)
            posts = await repository.get_many()
            return {post.filename for post in posts if post.filename}
        finally:
            await database.disconnect()

    referenced = asyncio.run(_referenced())
    storage = get_storage()
    orphans = [name for name in storage.list_files() if name not in referenced]

    if not orphans:
        print("✅ No orphaned files.")
        return

    for name in orphans:
        if dry_run:
            print(f"  would delete {name}")
        else:
            storage.delete(name)
            print(f"  🗑️  deleted {name}")

    print(f"{'Found' if dry_run else 'Removed'} {len(orphans)} orphaned file(s).")


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
