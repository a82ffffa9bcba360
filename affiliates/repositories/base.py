"""
Base repository.

Shared lookups and writes for the affiliate tables. Writes flush but never
commit; the calling service owns the unit of work.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repository bound to one model class.

    Example:
        class ClickEventRepository(BaseRepository[ClickEvent]):
            def __init__(self, session: AsyncSession):
                super().__init__(ClickEvent, session)
    """

    def __init__(
        self, model: type[ModelType], session: AsyncSession
    ) -> None:
        self.model = model
        self.session = session

    async def get_by_id(self, id: Any) -> ModelType | None:
        """Load row by primary key (identity map first)."""
        return await self.session.get(self.model, id)

    async def get_by(self, **filters: Any) -> ModelType | None:
        """
        Load the single row matching column filters.

        Only for unique columns; more than one match raises.
        """
        stmt = select(self.model).filter_by(**filters)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, **data: Any) -> ModelType:
        """
        Insert a row and return it with server defaults loaded.

        Args:
            **data: Column values

        Returns:
            Persisted entity (flushed, not committed)
        """
        entity = self.model(**data)
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, id: Any, **data: Any) -> ModelType | None:
        """
        Set column values on the row with the given primary key.

        Returns:
            Updated entity, or None when no such row exists
        """
        entity = await self.get_by_id(id)
        if entity is None:
            return None

        for column, value in data.items():
            setattr(entity, column, value)

        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def count(self, **filters: Any) -> int:
        """Number of rows matching column filters."""
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def exists(self, **filters: Any) -> bool:
        """Whether any row matches column filters."""
        return await self.count(**filters) > 0
