import io

import pytest
import pytest_asyncio
from fastapi import UploadFile
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from src.core.database import Database
from src.core.services.file_service import FileStorage
from src.apps.board.repositories.post_repository import PostRepository
from src.apps.board.services.post_service import BoardService


@pytest.fixture
def database(tmp_path) -> Database:
    """A throwaway sqlite database; NullPool keeps connections off other event loops."""
    return Database(f"sqlite+aiosqlite:///{tmp_path / 'board.db'}", poolclass=NullPool)


@pytest.fixture
def storage(tmp_path) -> FileStorage:
    storage = FileStorage(str(tmp_path / "uploads"))
    storage.ensure_directory()
    return storage


@pytest_asyncio.fixture
async def repository(database: Database):
    await database.create_all()
    yield PostRepository(database.get_session)
    await database.disconnect()


@pytest_asyncio.fixture
async def service(repository: PostRepository, storage: FileStorage) -> BoardService:
    return BoardService(repository, storage)


@pytest.fixture
def client(database: Database, storage: FileStorage):
    from src.main import create_app

    app = create_app(database=database, storage=storage)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_upload():
    def _make(filename: str, data: bytes = b"file body") -> UploadFile:
        return UploadFile(file=io.BytesIO(data), filename=filename)

    return _make
