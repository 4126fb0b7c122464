"""
Unit tests for CreateBookingUseCase

Test Coverage:
1. Happy path: eligible user, room with spare capacity
2. Capacity boundaries (capacity 1 vs 2 with a second user)
3. Duplicate booking for the same user, regardless of room
4. Error order: missing room before full room before eligibility before duplicate
5. Concurrent creates never exceed capacity
"""

from unittest.mock import AsyncMock

import anyio
import pytest

from src.platform.exception.exceptions import (
    BookingNotAllowedError,
    NotFoundError,
    TicketIneligibleError,
)
from src.service.lodging.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.lodging.app.dto.room_availability import RoomAvailability
from src.service.lodging.domain.entity.booking_entity import Booking
from src.service.lodging.domain.entity.room_entity import Room
from src.service.lodging.domain.enum.ticket_status import TicketStatus


pytestmark = pytest.mark.unit


class TestCreateBooking:
    @pytest.mark.asyncio
    async def test_eligible_user_books_room_with_spare_capacity(
        self, store, create_booking_use_case, get_booking_use_case, eligible_user
    ):
        # Given
        room = store.add_room(name='101', capacity=2)
        user_id = eligible_user(1)

        # When
        booking = await create_booking_use_case.create_booking(user_id=user_id, room_id=room.id)

        # Then
        assert booking.id is not None
        assert booking.user_id == user_id
        assert booking.room_id == room.id
        assert booking.created_at is not None

        # And: The reader returns the same room
        stored = await get_booking_use_case.get_booking(user_id=user_id)
        assert stored.id == booking.id
        assert stored.room_id == room.id

    @pytest.mark.asyncio
    async def test_capacity_one_rejects_second_user(
        self, store, create_booking_use_case, eligible_user
    ):
        # Given
        room = store.add_room(name='single', capacity=1)
        await create_booking_use_case.create_booking(user_id=eligible_user(1), room_id=room.id)

        # When/Then
        with pytest.raises(BookingNotAllowedError, match='full capacity'):
            await create_booking_use_case.create_booking(
                user_id=eligible_user(2), room_id=room.id
            )
        assert store.occupancy(room.id) == 1

    @pytest.mark.asyncio
    async def test_capacity_two_accepts_second_user(
        self, store, create_booking_use_case, eligible_user
    ):
        # Given
        room = store.add_room(name='double', capacity=2)
        await create_booking_use_case.create_booking(user_id=eligible_user(1), room_id=room.id)

        # When
        booking = await create_booking_use_case.create_booking(
            user_id=eligible_user(2), room_id=room.id
        )

        # Then
        assert booking.user_id == 2
        assert store.occupancy(room.id) == 2

    @pytest.mark.asyncio
    async def test_second_booking_for_same_user_is_rejected_in_any_room(
        self, store, create_booking_use_case, eligible_user
    ):
        # Given
        room_a = store.add_room(name='A', capacity=3)
        room_b = store.add_room(name='B', capacity=3)
        user_id = eligible_user(1)
        await create_booking_use_case.create_booking(user_id=user_id, room_id=room_a.id)

        # When/Then: Same room and a different room are both rejected
        for room in (room_a, room_b):
            with pytest.raises(BookingNotAllowedError, match='already has a booking'):
                await create_booking_use_case.create_booking(user_id=user_id, room_id=room.id)

        assert len(store.bookings) == 1

    @pytest.mark.asyncio
    async def test_missing_room_is_not_found(self, create_booking_use_case, eligible_user):
        with pytest.raises(NotFoundError, match='Room not found'):
            await create_booking_use_case.create_booking(user_id=eligible_user(1), room_id=0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'ticket_kwargs',
        [
            {'status': TicketStatus.RESERVED},
            {'is_remote': True},
            {'includes_hotel': False},
        ],
    )
    async def test_flipping_one_eligibility_condition_rejects_booking(
        self, store, create_booking_use_case, enroll_user, give_ticket, ticket_kwargs
    ):
        # Given: Otherwise eligible user with one failing ticket rule
        room = store.add_room(name='101', capacity=2)
        give_ticket(enroll_user(1), **ticket_kwargs)

        # When/Then
        with pytest.raises(BookingNotAllowedError):
            await create_booking_use_case.create_booking(user_id=1, room_id=room.id)
        assert store.bookings == {}

    @pytest.mark.asyncio
    async def test_user_without_enrollment_is_rejected(self, store, create_booking_use_case):
        room = store.add_room(name='101', capacity=2)

        with pytest.raises(TicketIneligibleError):
            await create_booking_use_case.create_booking(user_id=1, room_id=room.id)

    @pytest.mark.asyncio
    async def test_user_with_enrollment_but_no_ticket_is_rejected(
        self, store, create_booking_use_case, enroll_user
    ):
        room = store.add_room(name='101', capacity=2)
        enroll_user(1)

        with pytest.raises(TicketIneligibleError, match='no ticket'):
            await create_booking_use_case.create_booking(user_id=1, room_id=room.id)

    @pytest.mark.asyncio
    async def test_concurrent_creates_never_exceed_capacity(
        self, store, create_booking_use_case, eligible_user
    ):
        # Given: Room with two places and five eligible users racing for it
        room = store.add_room(name='race', capacity=2)
        user_ids = [eligible_user(user_id) for user_id in range(1, 6)]
        outcomes: list[str] = []

        async def _attempt(user_id: int) -> None:
            try:
                await create_booking_use_case.create_booking(user_id=user_id, room_id=room.id)
                outcomes.append('booked')
            except BookingNotAllowedError:
                outcomes.append('rejected')

        # When
        async with anyio.create_task_group() as tg:
            for user_id in user_ids:
                tg.start_soon(_attempt, user_id)

        # Then
        assert outcomes.count('booked') == 2
        assert outcomes.count('rejected') == 3
        assert store.occupancy(room.id) == 2


class TestCreateBookingOrder:
    """Check order with mocked collaborators"""

    def setup_method(self):
        self.booking_command_repo = AsyncMock()
        self.booking_query_repo = AsyncMock()
        self.room_occupancy_checker = AsyncMock()
        self.ticket_eligibility_checker = AsyncMock()
        self.use_case = CreateBookingUseCase(
            booking_command_repo=self.booking_command_repo,
            booking_query_repo=self.booking_query_repo,
            room_occupancy_checker=self.room_occupancy_checker,
            ticket_eligibility_checker=self.ticket_eligibility_checker,
        )
        self.room = Room(id=5, name='501', capacity=2, hotel_id=1)

    @pytest.mark.asyncio
    async def test_missing_room_short_circuits_before_eligibility(self):
        # Given
        self.room_occupancy_checker.check_room_availability.side_effect = NotFoundError(
            'Room not found'
        )

        # When/Then
        with pytest.raises(NotFoundError):
            await self.use_case.create_booking(user_id=1, room_id=5)

        self.ticket_eligibility_checker.check_eligibility.assert_not_called()
        self.booking_command_repo.create_within_capacity.assert_not_called()

    @pytest.mark.asyncio
    async def test_full_room_short_circuits_before_eligibility(self):
        # Given
        self.room_occupancy_checker.check_room_availability.return_value = RoomAvailability(
            room=self.room, occupancy=2
        )

        # When/Then
        with pytest.raises(BookingNotAllowedError, match='full capacity'):
            await self.use_case.create_booking(user_id=1, room_id=5)

        self.ticket_eligibility_checker.check_eligibility.assert_not_called()

    @pytest.mark.asyncio
    async def test_ineligible_user_short_circuits_before_duplicate_check(self):
        # Given
        self.room_occupancy_checker.check_room_availability.return_value = RoomAvailability(
            room=self.room, occupancy=0
        )
        self.ticket_eligibility_checker.check_eligibility.side_effect = TicketIneligibleError()

        # When/Then
        with pytest.raises(TicketIneligibleError):
            await self.use_case.create_booking(user_id=1, room_id=5)

        self.booking_query_repo.get_by_user_id.assert_not_called()
        self.booking_command_repo.create_within_capacity.assert_not_called()

    @pytest.mark.asyncio
    async def test_persists_through_capacity_guarded_insert(self):
        # Given
        self.room_occupancy_checker.check_room_availability.return_value = RoomAvailability(
            room=self.room, occupancy=1
        )
        self.booking_query_repo.get_by_user_id.return_value = None
        self.booking_command_repo.create_within_capacity.return_value = Booking(
            id=42, user_id=1, room_id=5
        )

        # When
        booking = await self.use_case.create_booking(user_id=1, room_id=5)

        # Then
        assert booking.id == 42
        call_kwargs = self.booking_command_repo.create_within_capacity.call_args.kwargs
        assert call_kwargs['capacity'] == 2
        assert call_kwargs['booking'].user_id == 1
        assert call_kwargs['booking'].room_id == 5
        assert call_kwargs['booking'].id is None
