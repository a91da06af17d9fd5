import os
from typing import AsyncGenerator, Generator

os.environ.setdefault("AUTH_SECRET_KEY", "test-secret-key")
os.environ.setdefault("AUTH_BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOGFIRE_SEND_TO_LOGFIRE", "false")

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from testcontainers.postgres import PostgresContainer

from ai.summarize import SummarizationClient
from api.dependencies import db, summarizer
from db.models import Base
from db.sessions import Database, open_database
from main import app
from tests.constants import PROVIDER_API_KEY, PROVIDER_SUMMARY, PROVIDER_URL


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    with PostgresContainer() as postgres:
        yield postgres


@pytest_asyncio.fixture(scope="function")
async def test_database(
    postgres_container: PostgresContainer,
) -> AsyncGenerator[Database, None]:
    async with open_database(
        url=postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://", 1
        )
    ) as database:
        async with database.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        yield database

        async with database.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def test_session(test_database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with test_database.session() as session:
        yield session


@pytest.fixture
def provider_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def summarization_client(
    provider_requests: list[httpx.Request],
) -> SummarizationClient:
    def handler(request: httpx.Request) -> httpx.Response:
        provider_requests.append(request)
        return httpx.Response(
            status_code=200, json=[{"summary_text": PROVIDER_SUMMARY}]
        )

    return SummarizationClient(
        api_key=PROVIDER_API_KEY,
        url=PROVIDER_URL,
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


@pytest_asyncio.fixture(scope="function")
async def test_client(
    test_database: Database,
    test_session: AsyncSession,
    summarization_client: SummarizationClient,
) -> AsyncGenerator[AsyncClient, None]:
    def override_get_session():
        return test_session

    def override_get_database() -> Database:
        return test_database

    def override_get_summarization_client() -> SummarizationClient:
        return summarization_client

    app.dependency_overrides[db.get_session] = override_get_session
    app.dependency_overrides[db.get_database] = override_get_database
    app.dependency_overrides[summarizer.get_summarization_client] = (
        override_get_summarization_client
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
