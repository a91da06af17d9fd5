from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from db.sessions import Database


def get_database(request: Request) -> Database:
    """Get the database handle created at startup.

    Args:
        request: The incoming request.

    Returns:
        The database handle.

    """
    return request.app.state.database


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get a session scoped to the request.

    Args:
        request: The incoming request.

    Yields:
        The async session.

    """
    async with get_database(request=request).session() as session:
        yield session
