"""Room availability check result DTO."""

import attrs

from src.service.lodging.domain.entity.room_entity import Room


@attrs.define(frozen=True)
class RoomAvailability:
    """Room plus its current occupancy (number of bookings referencing it)."""

    room: Room
    occupancy: int

    @property
    def is_full(self) -> bool:
        return self.room.is_full(self.occupancy)
