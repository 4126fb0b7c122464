from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.lodging.domain.entity.booking_entity import Booking
from src.service.lodging.driven_adapter.model.booking_model import BookingModel
from src.service.lodging.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl


class BookingQueryRepoImpl(IBookingQueryRepo):
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
    def _to_entity(db_booking: BookingModel) -> Booking:
        """
        Convert BookingModel to Booking entity

        The room is only attached when the relationship was eagerly loaded;
        touching an unloaded relationship would trigger lazy IO under asyncio.
        """
        room = None
        if 'room' in db_booking.__dict__ and db_booking.room is not None:
            room = RoomQueryRepoImpl._to_entity(db_booking.room)

        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            room_id=db_booking.room_id,
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
            room=room,
        )

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        if not is_storable_id(booking_id):
            return None

        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == booking_id)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                return None

            return BookingQueryRepoImpl._to_entity(db_booking)

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.room))
                .where(BookingModel.user_id == user_id)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                return None

            return BookingQueryRepoImpl._to_entity(db_booking)

    @Logger.io
    async def count_by_room_id(self, *, room_id: int) -> int:
        async with self._get_session() as session:
            count = await session.scalar(
                select(func.count(BookingModel.id)).where(BookingModel.room_id == room_id)
            )
            return count or 0
