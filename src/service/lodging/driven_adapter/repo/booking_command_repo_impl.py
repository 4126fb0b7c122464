"""
Booking Command Repository Implementation

Each write runs in a single transaction that first locks the target room row
(SELECT ... FOR UPDATE), re-counts the room's bookings and only then writes.
Concurrent writers for the same room are serialised on that lock, so the
capacity can never be exceeded. The unique constraint on booking.user_id
backs the one-booking-per-user rule.
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.exception.exceptions import BookingNotAllowedError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.lodging.domain.entity.booking_entity import Booking
from src.service.lodging.driven_adapter.model.booking_model import (
    BOOKING_USER_UNIQUE_CONSTRAINT,
    BookingModel,
)
from src.service.lodging.driven_adapter.model.room_model import RoomModel
from src.service.lodging.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl


def _is_duplicate_user_booking(error: IntegrityError) -> bool:
    # PostgreSQL reports the constraint name, SQLite reports the column
    message = str(error.orig)
    return BOOKING_USER_UNIQUE_CONSTRAINT in message or 'booking.user_id' in message


class BookingCommandRepoImpl(IBookingCommandRepo):
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
    async def _lock_room_and_count(session: AsyncSession, *, room_id: int) -> int:
        if not is_storable_id(room_id):
            raise NotFoundError('Room not found')

        locked_room_id = await session.scalar(
            select(RoomModel.id).where(RoomModel.id == room_id).with_for_update()
        )
        if locked_room_id is None:
            raise NotFoundError('Room not found')

        occupancy = await session.scalar(
            select(func.count(BookingModel.id)).where(BookingModel.room_id == room_id)
        )
        return occupancy or 0

    @Logger.io
    async def create_within_capacity(self, *, booking: Booking, capacity: int) -> Booking:
        try:
            async with self._get_session() as session:
                occupancy = await self._lock_room_and_count(session, room_id=booking.room_id)
                if occupancy >= capacity:
                    raise BookingNotAllowedError('Room is at full capacity')

                db_booking = BookingModel(user_id=booking.user_id, room_id=booking.room_id)
                session.add(db_booking)
                await session.flush()
                await session.refresh(db_booking)
                await session.commit()

                return BookingQueryRepoImpl._to_entity(db_booking)
        except IntegrityError as e:
            if _is_duplicate_user_booking(e):
                raise BookingNotAllowedError('User already has a booking') from e
            raise

    @Logger.io
    async def update_room_within_capacity(self, *, booking: Booking, capacity: int) -> Booking:
        async with self._get_session() as session:
            occupancy = await self._lock_room_and_count(session, room_id=booking.room_id)
            if occupancy >= capacity:
                raise BookingNotAllowedError('Room is at full capacity')

            result = await session.execute(
                update(BookingModel)
                .where(
                    BookingModel.id == booking.id,
                    BookingModel.user_id == booking.user_id,
                    BookingModel.room_id != booking.room_id,
                )
                .values(room_id=booking.room_id, updated_at=func.now())
                .execution_options(synchronize_session=False)
            )

            if result.rowcount == 0:
                exists = await session.scalar(
                    select(BookingModel.id).where(BookingModel.id == booking.id)
                )
                if exists is None:
                    raise NotFoundError('Booking not found')
                raise BookingNotAllowedError('Booking cannot be changed to this room')

            db_booking = await session.scalar(
                select(BookingModel)
                .where(BookingModel.id == booking.id)
                .execution_options(populate_existing=True)
            )
            await session.commit()

            return BookingQueryRepoImpl._to_entity(db_booking)
