"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio


@pytest.fixture(scope="function")
def test_database(tmp_path: Path) -> Generator[str, None, None]:
    """Return the URL of a fresh SQLite database file for this test."""
    dsn = f"sqlite:///{tmp_path / 'pointmap_test.db'}"
    os.environ["POINTMAP_DATABASE_URL"] = dsn
    yield dsn


@pytest.fixture(scope="function")
def reset_shared_db_connections(test_database: str) -> Generator[None, None, None]:
    """Reset and configure shared database connections for the test database."""
    from pointmap.database.connection import init_database, reset_database

    reset_database()
    init_database(test_database, force_reinit=True)

    yield

    reset_database()


@pytest_asyncio.fixture(scope="function")
async def db_schema(reset_shared_db_connections: None) -> AsyncGenerator[None, None]:
    """Create all tables in the test database and dispose the pool afterwards."""
    _ = reset_shared_db_connections

    from pointmap.database.connection import create_tables, dispose_database

    await create_tables()
    yield
    await dispose_database()


@pytest.fixture
def gql(db_schema: None):
    """Execute a GraphQL operation against the schema with a fresh request context."""
    _ = db_schema

    from pointmap.graphql.schema import build_context, schema

    async def execute(query: str, variables: dict[str, Any] | None = None):
        return await schema.execute(
            query, variable_values=variables, context_value=build_context()
        )

    return execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
