from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.lodging.domain.entity.room_entity import Room
from src.service.lodging.driven_adapter.model.room_model import RoomModel


class RoomQueryRepoImpl(IRoomQueryRepo):
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

    @staticmethod
    def _to_entity(db_room: RoomModel) -> Room:
        return Room(
            id=db_room.id,
            name=db_room.name,
            capacity=db_room.capacity,
            hotel_id=db_room.hotel_id,
            created_at=db_room.created_at,
            updated_at=db_room.updated_at,
        )

    @Logger.io
    async def get_by_id(self, *, room_id: int) -> Optional[Room]:
        if not is_storable_id(room_id):
            return None

        async with self._get_session() as session:
            result = await session.execute(select(RoomModel).where(RoomModel.id == room_id))
            db_room = result.scalar_one_or_none()

            if not db_room:
                return None

            return RoomQueryRepoImpl._to_entity(db_room)
