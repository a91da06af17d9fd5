from collections.abc import Sequence
from typing import Any, Generic, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

Model = TypeVar("Model", bound=object)


class BaseRepository(Generic[Model]):
    def __init__(self, model: Type[Model]):
        self.model = model

    async def create(self, session: AsyncSession, data: dict[str, Any]) -> Model:
        """Create a new model instance.

        Args:
            session: The async session.
            data: The data to create the model instance.

        Returns:
            The created model instance.

        """
        instance = self.model(**data)

        session.add(instance=instance)
        await session.commit()
        await session.refresh(instance)

        return instance

    async def get_all(
        self,
        session: AsyncSession,
        order_by: Sequence[Any] = (),
        **filters,
    ) -> list[Model]:
        """Get all model instances matching the filters.

        Args:
            session: The async session.
            order_by: The columns to sort by.
            **filters: The filters to apply to the query.

        Returns:
            The list of model instances.

        """
        result = await session.execute(
            statement=select(self.model).filter_by(**filters).order_by(*order_by)
        )

        return list(result.scalars().all())

    async def get_by(self, session: AsyncSession, **filters) -> Model | None:
        """Get a model instance by filters.

        Args:
            session: The async session.
            **filters: The filters to apply to the query.

        Returns:
            The model instance.

        """
        result = await session.execute(
            statement=select(self.model).filter_by(**filters)
        )
        return result.scalar_one_or_none()

    async def exists(self, session: AsyncSession, **filters) -> bool:
        """Check whether a model instance matches the filters.

        Args:
            session: The async session.
            **filters: The filters to apply to the query.

        Returns:
            True if at least one instance matches, False otherwise.

        """
        return await self.get_count(session=session, **filters) > 0

    async def get_count(self, session: AsyncSession, **filters) -> int:
        """Get the count of model instances by filters.

        Args:
            session: The async session.
            **filters: The filters to apply to the query.

        Returns:
            The count of model instances.

        """
        result = await session.execute(
            statement=select(func.count()).select_from(self.model).filter_by(**filters)
        )
        return result.scalar() or 0
