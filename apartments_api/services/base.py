from typing import Any, Generic, TypeVar, Type, Optional, List, Sequence

from sqlalchemy import ColumnElement
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession

ModelType = TypeVar("ModelType")


class BaseCRUDService(Generic[ModelType]):
    """Base class for read/create operations on SQLModel models."""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, session: AsyncSession, id: int) -> Optional[ModelType]:
        """Get a single record by ID, or None."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def find(
        self,
        session: AsyncSession,
        where: Sequence[ColumnElement[bool]] = (),
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: int = 50,
    ) -> tuple[List[ModelType], int]:
        """Get one page of records matching all clauses.

        Args:
            session: Database session
            where: Clauses combined with AND; empty means no filter
            order_by: ORDER BY expressions, applied before pagination
            offset: Number of records to skip
            limit: Number of records to return

        Returns:
            Tuple of (items list, total count of matching records)
        """
        query = select(self.model)
        for clause in where:
            query = query.where(clause)

        # Get total count (before pagination)
        count_query = select(func.count()).select_from(query.subquery())
        total_result = await session.execute(count_query)
        total = total_result.scalar_one()

        # Past the last row; also keeps huge page numbers out of OFFSET.
        if offset >= total:
            return [], total

        if order_by:
            query = query.order_by(*order_by)

        query = query.offset(offset).limit(min(limit, total - offset))

        result = await session.execute(query)
        items = list(result.scalars().all())

        return items, total

    async def count(self, session: AsyncSession) -> int:
        result = await session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def create(
        self,
        session: AsyncSession,
        obj_in: ModelType,
    ) -> ModelType:
        """Create a new record.

        Args:
            session: Database session
            obj_in: Model instance to create

        Returns:
            Created model instance
        """
        session.add(obj_in)
        await session.commit()
        await session.refresh(obj_in)
        return obj_in
