from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Summary
from db.repositories.base import BaseRepository


class SummaryRepository(BaseRepository[Summary]):
    def __init__(self):
        super().__init__(model=Summary)

    async def get_all_for_user(
        self, session: AsyncSession, user_id: int
    ) -> list[Summary]:
        """Get the summaries owned by a user, oldest first.

        Args:
            session: The async session.
            user_id: The owning user ID.

        Returns:
            The list of summaries.

        """
        return await self.get_all(
            session,
            order_by=(self.model.created_at, self.model.id),
            user_id=user_id,
        )
