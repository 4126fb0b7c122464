"""
In-memory implementations of the lodging repositories

Backs the unit tests and the HTTP tests (via provider overrides). All repos
share one InMemoryLodgingStore; capacity-guarded writes hold the store's
anyio.Lock across their check and write, mirroring the row lock taken by the
SQL implementation.
"""

import itertools
from datetime import datetime, timezone
from typing import Dict, Iterator, Optional, Set

import anyio
import attrs

from src.platform.exception.exceptions import BookingNotAllowedError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.lodging.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.lodging.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.lodging.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.lodging.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.lodging.domain.entity.booking_entity import Booking
from src.service.lodging.domain.entity.enrollment_entity import Enrollment
from src.service.lodging.domain.entity.room_entity import Room
from src.service.lodging.domain.entity.ticket_entity import Ticket


class InMemoryLodgingStore:
    def __init__(self) -> None:
        self.rooms: Dict[int, Room] = {}
        self.bookings: Dict[int, Booking] = {}
        self.enrollments: Dict[int, Enrollment] = {}
        self.tickets: Dict[int, Ticket] = {}
        self.session_tokens: Set[str] = set()
        self.lock = anyio.Lock()
        self._ids: Dict[str, Iterator[int]] = {}

    def next_id(self, table: str) -> int:
        return next(self._ids.setdefault(table, itertools.count(1)))

    # Seeding helpers for catalog data this service only reads

    def add_room(self, *, name: str, capacity: int, hotel_id: int = 1) -> Room:
        room = Room(id=self.next_id('room'), name=name, capacity=capacity, hotel_id=hotel_id)
        self.rooms[room.id] = room
        return room

    def add_enrollment(self, enrollment: Enrollment) -> Enrollment:
        if enrollment.id is None:
            enrollment = attrs.evolve(enrollment, id=self.next_id('enrollment'))
        self.enrollments[enrollment.id] = enrollment
        return enrollment

    def add_ticket(self, ticket: Ticket) -> Ticket:
        if ticket.id is None:
            ticket = attrs.evolve(ticket, id=self.next_id('ticket'))
        self.tickets[ticket.id] = ticket
        return ticket

    def add_session(self, token: str) -> None:
        self.session_tokens.add(token)

    def occupancy(self, room_id: int) -> int:
        return sum(1 for b in self.bookings.values() if b.room_id == room_id)


class InMemoryRoomQueryRepo(IRoomQueryRepo):
    def __init__(self, store: InMemoryLodgingStore):
        self.store = store

    @Logger.io
    async def get_by_id(self, *, room_id: int) -> Optional[Room]:
        return self.store.rooms.get(room_id)


class InMemoryBookingQueryRepo(IBookingQueryRepo):
    def __init__(self, store: InMemoryLodgingStore):
        self.store = store

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        booking = self.store.bookings.get(booking_id)
        return attrs.evolve(booking) if booking else None

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        for booking in self.store.bookings.values():
            if booking.user_id == user_id:
                return attrs.evolve(booking, room=self.store.rooms.get(booking.room_id))
        return None

    @Logger.io
    async def count_by_room_id(self, *, room_id: int) -> int:
        return self.store.occupancy(room_id)


class InMemoryBookingCommandRepo(IBookingCommandRepo):
    def __init__(self, store: InMemoryLodgingStore):
        self.store = store

    def _ensure_capacity(self, *, room_id: int, capacity: int) -> None:
        if room_id not in self.store.rooms:
            raise NotFoundError('Room not found')
        if self.store.occupancy(room_id) >= capacity:
            raise BookingNotAllowedError('Room is at full capacity')

    @Logger.io
    async def create_within_capacity(self, *, booking: Booking, capacity: int) -> Booking:
        async with self.store.lock:
            self._ensure_capacity(room_id=booking.room_id, capacity=capacity)
            if any(b.user_id == booking.user_id for b in self.store.bookings.values()):
                raise BookingNotAllowedError('User already has a booking')

            now = datetime.now(timezone.utc)
            created = attrs.evolve(
                booking, id=self.store.next_id('booking'), created_at=now, updated_at=now
            )
            self.store.bookings[created.id] = created
            return attrs.evolve(created)

    @Logger.io
    async def update_room_within_capacity(self, *, booking: Booking, capacity: int) -> Booking:
        async with self.store.lock:
            self._ensure_capacity(room_id=booking.room_id, capacity=capacity)

            stored = self.store.bookings.get(booking.id) if booking.id is not None else None
            if stored is None:
                raise NotFoundError('Booking not found')
            if stored.user_id != booking.user_id or stored.room_id == booking.room_id:
                raise BookingNotAllowedError('Booking cannot be changed to this room')

            updated = attrs.evolve(
                stored, room_id=booking.room_id, updated_at=datetime.now(timezone.utc)
            )
            self.store.bookings[updated.id] = updated
            return attrs.evolve(updated)


class InMemoryEnrollmentQueryRepo(IEnrollmentQueryRepo):
    def __init__(self, store: InMemoryLodgingStore):
        self.store = store

    @Logger.io
    async def get_with_address_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        for enrollment in self.store.enrollments.values():
            if enrollment.user_id == user_id:
                return enrollment
        return None


class InMemoryTicketQueryRepo(ITicketQueryRepo):
    def __init__(self, store: InMemoryLodgingStore):
        self.store = store

    @Logger.io
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        for ticket in self.store.tickets.values():
            if ticket.enrollment_id == enrollment_id:
                return ticket
        return None


class InMemorySessionQueryRepo(ISessionQueryRepo):
    def __init__(self, store: InMemoryLodgingStore):
        self.store = store

    @Logger.io
    async def exists(self, *, token: str) -> bool:
        return token in self.store.session_tokens
