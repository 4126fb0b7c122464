from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import BookingNotAllowedError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.lodging.app.service.room_occupancy_checker import RoomOccupancyChecker
from src.service.lodging.domain.entity.booking_entity import Booking


class UpdateBookingRoomUseCase:
    """
    Move an existing booking to another room (Booking Mutator)

    Ticket eligibility is not re-checked: a user who already holds a booking is
    assumed to still be eligible.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        room_occupancy_checker: RoomOccupancyChecker,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.room_occupancy_checker = room_occupancy_checker

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        room_occupancy_checker: RoomOccupancyChecker = Depends(
            Provide[Container.room_occupancy_checker]
        ),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            room_occupancy_checker=room_occupancy_checker,
        )

    @Logger.io
    async def update_booking(self, *, user_id: int, booking_id: int, room_id: int) -> Booking:
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError('Booking not found')

        # Wrong owner and same-room reassignment share one error kind
        if not booking.is_owned_by(user_id) or booking.room_id == room_id:
            raise BookingNotAllowedError('Booking cannot be changed to this room')

        availability = await self.room_occupancy_checker.check_room_availability(room_id=room_id)
        if availability.is_full:
            raise BookingNotAllowedError('Room is at full capacity')

        updated_booking = await self.booking_command_repo.update_room_within_capacity(
            booking=booking.move_to_room(room_id), capacity=availability.room.capacity
        )

        Logger.base.info(
            f'🔁 [UPDATE-BOOKING] booking {booking_id} '
            f'moved from room {booking.room_id} to {room_id}'
        )
        return updated_booking
