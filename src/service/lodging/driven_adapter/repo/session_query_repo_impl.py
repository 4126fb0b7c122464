from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.lodging.driven_adapter.model.session_model import SessionModel


class SessionQueryRepoImpl(ISessionQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError('No session_factory available')
        async with self.session_factory() as session:
            yield session

    @Logger.io
    async def exists(self, *, token: str) -> bool:
        async with self._get_session() as session:
            session_id = await session.scalar(
                select(SessionModel.id).where(SessionModel.token == token).limit(1)
            )
            return session_id is not None
