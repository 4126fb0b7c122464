"""
Booking Command Repository Interface

Both writes re-check the room's capacity inside the same transaction as the
write itself, so two concurrent requests cannot both take the last place in a
room. Implementations raise BookingNotAllowedError and write nothing when a
guard fails.
"""

from abc import ABC, abstractmethod

from src.service.lodging.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create_within_capacity(self, *, booking: Booking, capacity: int) -> Booking:
        """
        Insert a new booking if its room still has fewer than `capacity` bookings

        Args:
            booking: Booking entity without id
            capacity: Capacity of booking.room_id

        Returns:
            Persisted booking entity with id

        Raises:
            NotFoundError: Room no longer exists
            BookingNotAllowedError: Room is full or the user already has a booking
        """
        pass

    @abstractmethod
    async def update_room_within_capacity(self, *, booking: Booking, capacity: int) -> Booking:
        """
        Move an existing booking to booking.room_id if that room has spare capacity

        The write only applies while the stored row still belongs to
        booking.user_id and still points at a different room.

        Args:
            booking: Booking entity carrying the new room_id
            capacity: Capacity of the target room

        Returns:
            Updated booking entity

        Raises:
            NotFoundError: Booking or target room no longer exists
            BookingNotAllowedError: Target room is full, or the ownership/no-op guard failed
        """
        pass
