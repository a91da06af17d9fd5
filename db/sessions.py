from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Owns the engine and session factory for the lifetime of the process."""

    def __init__(self, url: str, echo: bool = False):
        self.engine: AsyncEngine = create_async_engine(
            url=url, echo=echo, pool_pre_ping=True
        )
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session bound to this database.

        Yields:
            The async session, closed when the block exits.

        """
        async with self.session_factory() as session:
            yield session

    async def ping(self) -> bool:
        """Check database connectivity.

        Returns:
            True if a trivial query succeeds, False otherwise.

        """
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
        except Exception:  # noqa: BLE001
            return False

        return True

    async def close(self) -> None:
        await self.engine.dispose()


@asynccontextmanager
async def open_database(url: str, echo: bool = False) -> AsyncIterator[Database]:
    """Create a database handle and dispose of it on every exit path.

    Args:
        url: The SQLAlchemy database URL.
        echo: Whether to echo SQL statements.

    Yields:
        The database handle.

    """
    database = Database(url=url, echo=echo)
    try:
        yield database
    finally:
        await database.close()
