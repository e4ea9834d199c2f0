from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.core.response.schemas import Page, PageRequest

T = TypeVar("T", bound=SQLModel)

# SQL INTEGER columns and LIMIT/OFFSET are signed 64 bit
MAX_INTEGER = 2**63 - 1


def fits_integer_column(value: Any) -> bool:
    return not isinstance(value, int) or -MAX_INTEGER - 1 <= value <= MAX_INTEGER


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class BaseRepository(Generic[T]):
    model: Type[T]

    def __init__(self, get_session: Callable[..., AsyncSession]):
        self.get_session = get_session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise RepositoryError(
                f"Database integrity error during {operation}: {error}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def has_column(self, field: str) -> bool:
        return field in self.model.__table__.columns  # type: ignore

    def _build_select_stmt(self, *conditions: Any, **filters) -> Any:
        """Build select statement with optional where clauses and equality filters."""
        stmt = select(self.model)

        for condition in conditions:
            stmt = stmt.where(condition)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        return stmt

    def _order_by(self, stmt: Any, page_request: PageRequest) -> Any:
        if not self.has_column(page_request.sort_field):
            raise RepositoryError(
                f"Cannot sort {self.model.__name__} by '{page_request.sort_field}'"
            )
        column = col(getattr(self.model, page_request.sort_field))
        order = column.asc() if page_request.sort_direction == "asc" else column.desc()
        # Tie-break on the primary key so pages never overlap
        if page_request.sort_field != "id":
            id_column = col(self.model.id)  # type: ignore
            return stmt.order_by(
                order,
                id_column.asc() if page_request.sort_direction == "asc" else id_column.desc(),
            )
        return stmt.order_by(order)

    # ----------------- READ ----------------- #
    async def get(self, item_id: Any) -> Optional[T]:
        """Get a single item by ID, or None when it does not exist."""
        if not fits_integer_column(item_id):
            return None
        async with self.get_session() as db:
            try:
                return await db.get(self.model, item_id)
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get")

    async def get_many(self, *conditions: Any, **filters) -> List[T]:  # type:ignore
        """Get every item matching the conditions, unpaginated."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(*conditions, **filters)
                result = await db.exec(stmt.order_by(col(self.model.id)))  # type: ignore
                return list(result.all())
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_many")

    async def list(
        self, page_request: PageRequest, *conditions: Any, **filters
    ) -> Page[T]:  # type:ignore
        """Get a page of items plus the total count of matching rows."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(*conditions, **filters)

                # Get total count
                count_stmt = select(func.count()).select_from(stmt.subquery())
                total_result = await db.exec(count_stmt)
                total = total_result.one()

                if not fits_integer_column(page_request.offset):
                    return Page.build([], page_request, total)

                # Get paginated items
                stmt = self._order_by(stmt, page_request)
                result = await db.exec(
                    stmt.offset(page_request.offset).limit(page_request.size)
                )
                items = result.all()

                return Page.build(items, page_request, total)
            except SQLAlchemyError as e:
                self._handle_db_error(e, "list")

    async def count(self, *conditions: Any, **filters) -> int:  # type:ignore
        """Count items matching optional filters."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(*conditions, **filters)
                count_stmt = select(func.count()).select_from(stmt.subquery())
                result = await db.exec(count_stmt)
                return result.one()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "count")

    # ----------------- WRITE ----------------- #
    async def save(self, obj: T) -> T:  # type:ignore
        """Insert obj when it has no id yet, otherwise overwrite the stored row."""
        async with self.get_session() as db:
            try:
                if getattr(obj, "id", None) is None:
                    db.add(obj)
                else:
                    obj = await db.merge(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "save")

    async def delete(self, item_id: Any) -> bool:  # type:ignore
        """Permanently delete the item from DB. Missing ids are a no-op."""
        if not fits_integer_column(item_id):
            return False
        async with self.get_session() as db:
            try:
                db_obj = await db.get(self.model, item_id)
                if not db_obj:
                    return False

                await db.delete(db_obj)
                await db.commit()
                return True
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "delete")
