import logging
from typing import Any, Generic, TypeVar

from sqlmodel import SQLModel

from src.core import exceptions
from src.core.bases.base_repository import BaseRepository, RepositoryError
from src.core.response.schemas import PageRequest

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """Business layer over a repository, translating storage failures."""

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @property
    def model_name(self) -> str:
        return self.repository.model.__name__

    def _service_error(self, error: RepositoryError, operation: str) -> exceptions.ServiceException:
        logger.error(f"{self.model_name} {operation} failed: {error}")
        return exceptions.ServiceException(str(error))

    async def get_by_id(self, item_id: Any) -> T:
        try:
            item = await self.repository.get(item_id)
        except RepositoryError as e:
            raise self._service_error(e, "get") from e
        if item is None:
            raise exceptions.NotFoundException(
                f"{self.model_name} with id {item_id} not found"
            )
        return item

    def _check_sort(self, page_request: PageRequest) -> None:
        if not self.repository.has_column(page_request.sort_field):
            raise exceptions.ValidationException(
                f"Unknown sort field '{page_request.sort_field}'"
            )

    async def save(self, item: T) -> T:
        try:
            return await self.repository.save(item)
        except RepositoryError as e:
            raise self._service_error(e, "save") from e

    async def delete(self, item_id: Any) -> bool:
        try:
            return await self.repository.delete(item_id)
        except RepositoryError as e:
            raise self._service_error(e, "delete") from e
