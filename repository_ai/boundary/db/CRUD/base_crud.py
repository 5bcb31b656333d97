"""
Shared CRUD helpers for SQLAlchemy models.

Subclasses bind a model and add their domain queries. None of these methods
commit; callers own the transaction.

Dependencies: sqlalchemy
System role: Foundation for document and chunk CRUD
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from repository_ai.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic CRUD bound to one model class.

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert one row and load server-side defaults back into it.

        Returns:
            The flushed instance, with id and timestamps populated
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def update_by_id(self, session: AsyncSession, id: int, **values: Any) -> bool:
        """
        Set columns on one row.

        Returns:
            False when no row has this id
        """
        result = await session.execute(update(self.model).where(self.model.id == id).values(**values))
        return result.rowcount > 0

    async def find_where(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] = (),
    ) -> Sequence[ModelT]:
        stmt = select(self.model).where(*criteria).order_by(*order_by)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_where(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> int:
        result = await session.execute(select(func.count()).select_from(self.model).where(*criteria))
        return result.scalar_one()

    async def delete_where(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> int:
        """
        Delete every row matching criteria.

        Returns:
            int: Number of rows deleted
        """
        result = await session.execute(delete(self.model).where(*criteria))
        return result.rowcount
