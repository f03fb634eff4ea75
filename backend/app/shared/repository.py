"""
Base repository with common CRUD operations.

Uses SQLAlchemy async session for non-blocking database access.

Usage:
    class TrainingPlanRepository(BaseRepository[TrainingPlan]):
        def __init__(self, db: AsyncSession):
            super().__init__(db, TrainingPlan)
"""

from typing import TypeVar, Generic, Type
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository for database operations.

    All methods are async for use with AsyncSession. Methods flush but
    do not commit; committing is up to the feature repository.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize repository.

        Args:
            db: Async database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def get_by_id(self, id: str | int) -> T | None:
        """
        Get entity by primary key ID.

        Returns:
            Entity if found, None otherwise
        """
        result = await self.db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs) -> T:
        """
        Create new entity.

        Args:
            **kwargs: Field values for new entity

        Returns:
            Created entity with generated ID
        """
        entity = self.model(**kwargs)
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity: T, **kwargs) -> T:
        """
        Update entity fields.

        Args:
            entity: Entity to update
            **kwargs: Field values to update

        Returns:
            Updated entity
        """
        for key, value in kwargs.items():
            setattr(entity, key, value)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity
