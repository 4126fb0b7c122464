from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.dto.room_availability import RoomAvailability
from src.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.lodging.app.interface.i_room_query_repo import IRoomQueryRepo


class RoomOccupancyChecker:
    """Looks up a room and counts how many bookings currently reference it. Read-only."""

    def __init__(self, *, room_query_repo: IRoomQueryRepo, booking_query_repo: IBookingQueryRepo):
        self.room_query_repo = room_query_repo
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def check_room_availability(self, *, room_id: int) -> RoomAvailability:
        room = await self.room_query_repo.get_by_id(room_id=room_id)
        if not room:
            raise NotFoundError('Room not found')

        occupancy = await self.booking_query_repo.count_by_room_id(room_id=room_id)
        return RoomAvailability(room=room, occupancy=occupancy)
