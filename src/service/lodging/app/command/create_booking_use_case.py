from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import BookingNotAllowedError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.lodging.app.service.room_occupancy_checker import RoomOccupancyChecker
from src.service.lodging.app.service.ticket_eligibility_checker import TicketEligibilityChecker
from src.service.lodging.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    """
    Create booking use case (Booking Allocator)

    Flow (short-circuits on the first failure):
    1. Room must exist (404) and have spare capacity (403)
    2. User's ticket must entitle them to a hotel room (403)
    3. User must not already have a booking (403)
    4. Insert the booking; the repo re-checks capacity and the one-booking-per-user
       constraint inside the same transaction
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        room_occupancy_checker: RoomOccupancyChecker,
        ticket_eligibility_checker: TicketEligibilityChecker,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.room_occupancy_checker = room_occupancy_checker
        self.ticket_eligibility_checker = ticket_eligibility_checker

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
        ticket_eligibility_checker: TicketEligibilityChecker = Depends(
            Provide[Container.ticket_eligibility_checker]
        ),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            room_occupancy_checker=room_occupancy_checker,
            ticket_eligibility_checker=ticket_eligibility_checker,
        )

    @Logger.io
    async def create_booking(self, *, user_id: int, room_id: int) -> Booking:
        availability = await self.room_occupancy_checker.check_room_availability(room_id=room_id)
        if availability.is_full:
            raise BookingNotAllowedError('Room is at full capacity')

        await self.ticket_eligibility_checker.check_eligibility(user_id=user_id)

        existing_booking = await self.booking_query_repo.get_by_user_id(user_id=user_id)
        if existing_booking:
            raise BookingNotAllowedError('User already has a booking')

        booking = Booking.create(user_id=user_id, room_id=room_id)
        created_booking = await self.booking_command_repo.create_within_capacity(
            booking=booking, capacity=availability.room.capacity
        )

        Logger.base.info(
            f'🏨 [CREATE-BOOKING] booking {created_booking.id} '
            f'for user {user_id} in room {room_id}'
        )
        return created_booking
