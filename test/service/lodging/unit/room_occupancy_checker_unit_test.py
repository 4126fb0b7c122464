"""
Unit tests for RoomOccupancyChecker

Test Coverage:
1. Missing room raises NotFoundError without counting bookings
2. Occupancy equals the number of bookings referencing the room
3. is_full flips exactly when occupancy reaches capacity
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.lodging.app.service.room_occupancy_checker import RoomOccupancyChecker
from src.service.lodging.domain.entity.room_entity import Room


pytestmark = pytest.mark.unit


class TestRoomOccupancyChecker:
    def setup_method(self):
        self.room_query_repo = AsyncMock()
        self.booking_query_repo = AsyncMock()
        self.checker = RoomOccupancyChecker(
            room_query_repo=self.room_query_repo,
            booking_query_repo=self.booking_query_repo,
        )

    @pytest.mark.asyncio
    async def test_missing_room_raises_not_found(self):
        # Given: No room with this id
        self.room_query_repo.get_by_id.return_value = None

        # When/Then
        with pytest.raises(NotFoundError, match='Room not found'):
            await self.checker.check_room_availability(room_id=99)

        self.booking_query_repo.count_by_room_id.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'capacity,occupancy,expected_full',
        [
            (1, 0, False),
            (1, 1, True),
            (3, 2, False),
            (3, 3, True),
            (2, 5, True),
        ],
    )
    async def test_is_full_when_occupancy_reaches_capacity(
        self, capacity: int, occupancy: int, expected_full: bool
    ):
        # Given
        room = Room(id=7, name='101', capacity=capacity, hotel_id=1)
        self.room_query_repo.get_by_id.return_value = room
        self.booking_query_repo.count_by_room_id.return_value = occupancy

        # When
        availability = await self.checker.check_room_availability(room_id=7)

        # Then
        assert availability.room == room
        assert availability.occupancy == occupancy
        assert availability.is_full is expected_full
        self.booking_query_repo.count_by_room_id.assert_awaited_once_with(room_id=7)


class TestRoomOccupancyAgainstStore:
    @pytest.mark.asyncio
    async def test_occupancy_counts_bookings_for_that_room_only(
        self, store, room_occupancy_checker, create_booking_use_case, eligible_user
    ):
        # Given: Two rooms, two bookings in the first and one in the second
        room_a = store.add_room(name='A', capacity=3)
        room_b = store.add_room(name='B', capacity=3)
        for user_id in (1, 2):
            await create_booking_use_case.create_booking(
                user_id=eligible_user(user_id), room_id=room_a.id
            )
        await create_booking_use_case.create_booking(user_id=eligible_user(3), room_id=room_b.id)

        # When
        availability_a = await room_occupancy_checker.check_room_availability(room_id=room_a.id)
        availability_b = await room_occupancy_checker.check_room_availability(room_id=room_b.id)

        # Then
        assert availability_a.occupancy == 2
        assert availability_b.occupancy == 1
