"""
Integration fixtures

- client: the FastAPI app (test lifespan, no PostgreSQL) with every repository
  provider overridden by an in-memory repository over the test's store
- database: a fresh file-backed aiosqlite Database with all tables created
"""

from collections.abc import AsyncIterator, Callable, Iterator
from contextlib import asynccontextmanager
from pathlib import Path

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger
from src.service.lodging.driven_adapter.repo.in_memory_store import (
    InMemoryBookingCommandRepo,
    InMemoryBookingQueryRepo,
    InMemoryEnrollmentQueryRepo,
    InMemoryLodgingStore,
    InMemoryRoomQueryRepo,
    InMemorySessionQueryRepo,
    InMemoryTicketQueryRepo,
)


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """Minimal lifespan for testing - wiring only, repositories are overridden"""
    Logger.base.info('🧪 [Test App] Starting up...')
    container.wire(modules=WIRE_MODULES)

    yield

    container.unwire()
    Logger.base.info('🧪 [Test App] Shutdown complete')


@pytest.fixture
def client(store: InMemoryLodgingStore) -> Iterator[TestClient]:
    container.room_query_repo.override(providers.Object(InMemoryRoomQueryRepo(store)))
    container.booking_query_repo.override(providers.Object(InMemoryBookingQueryRepo(store)))
    container.booking_command_repo.override(providers.Object(InMemoryBookingCommandRepo(store)))
    container.enrollment_query_repo.override(
        providers.Object(InMemoryEnrollmentQueryRepo(store))
    )
    container.ticket_query_repo.override(providers.Object(InMemoryTicketQueryRepo(store)))
    container.session_query_repo.override(providers.Object(InMemorySessionQueryRepo(store)))
    # Checkers and JwtAuth are singletons; rebuild them over the overridden repos
    container.reset_singletons()

    app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    container.reset_override()
    container.reset_singletons()


@pytest.fixture
def auth_headers(
    client: TestClient, store: InMemoryLodgingStore
) -> Callable[[int], dict[str, str]]:
    """Issue a session-backed bearer token for a user"""

    def _headers(user_id: int) -> dict[str, str]:
        token = container.jwt_auth().create_jwt_token(user_id=user_id)
        store.add_session(token)
        return {'Authorization': f'Bearer {token}'}

    return _headers


@pytest.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    db = Database(db_url=f'sqlite+aiosqlite:///{tmp_path / "lodging.db"}')
    await db.create_db_and_tables()

    yield db

    await db.dispose()
