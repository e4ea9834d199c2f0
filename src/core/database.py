import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import Field, SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.core.config import settings

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, db_url: str, echo: bool = False, **engine_kwargs: Any):
        self.url = db_url
        self.engine: AsyncEngine = create_async_engine(
            db_url, echo=echo, **engine_kwargs
        )

    async def create_all(self) -> None:
        """Create every table registered on the SQLModel metadata."""
        # Make sure app models are imported before touching the metadata
        import src.shared.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables ready (%s)", self.url)

    async def disconnect(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, Any]:
        async with AsyncSession(self.engine) as session:
            yield session


database = Database(settings.ASYNC_DATABASE_URL)


class BaseModel(SQLModel):
    """Base model with common fields."""

    id: Optional[int] = Field(default=None, primary_key=True)
