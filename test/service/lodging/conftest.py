"""
Shared fixtures for lodging tests

Every test gets a fresh InMemoryLodgingStore; the use cases and checkers are
built over the in-memory repositories backed by it.
"""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from src.service.lodging.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.lodging.app.command.update_booking_room_use_case import (
    UpdateBookingRoomUseCase,
)
from src.service.lodging.app.query.get_booking_use_case import GetBookingUseCase
from src.service.lodging.app.service.room_occupancy_checker import RoomOccupancyChecker
from src.service.lodging.app.service.ticket_eligibility_checker import TicketEligibilityChecker
from src.service.lodging.domain.entity.enrollment_entity import Address, Enrollment
from src.service.lodging.domain.entity.ticket_entity import Ticket, TicketType
from src.service.lodging.domain.enum.ticket_status import TicketStatus
from src.service.lodging.driven_adapter.repo.in_memory_store import (
    InMemoryBookingCommandRepo,
    InMemoryBookingQueryRepo,
    InMemoryEnrollmentQueryRepo,
    InMemoryLodgingStore,
    InMemoryRoomQueryRepo,
    InMemoryTicketQueryRepo,
)


@pytest.fixture
def store() -> InMemoryLodgingStore:
    return InMemoryLodgingStore()


@pytest.fixture
def enroll_user(store: InMemoryLodgingStore) -> Callable[..., Enrollment]:
    """Create an enrollment (with one address) for a user"""

    def _enroll(user_id: int) -> Enrollment:
        return store.add_enrollment(
            Enrollment(
                user_id=user_id,
                name=f'Attendee {user_id}',
                cpf='12345678909',
                birthday=datetime(1990, 1, 1, tzinfo=timezone.utc),
                phone='(21) 98999-9999',
                addresses=[
                    Address(
                        cep='22250-040',
                        street='Rua Exemplo',
                        city='Rio de Janeiro',
                        state='RJ',
                        number='10',
                        neighborhood='Botafogo',
                    )
                ],
            )
        )

    return _enroll


@pytest.fixture
def give_ticket(store: InMemoryLodgingStore) -> Callable[..., Ticket]:
    """Attach a ticket to an enrollment; defaults describe a hotel-eligible ticket"""

    def _give(
        enrollment: Enrollment,
        *,
        status: TicketStatus = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
    ) -> Ticket:
        assert enrollment.id is not None
        ticket_type = TicketType(
            id=1,
            name='In person + hotel',
            price=600,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )
        return store.add_ticket(
            Ticket(
                enrollment_id=enrollment.id,
                ticket_type_id=1,
                status=status,
                ticket_type=ticket_type,
            )
        )

    return _give


@pytest.fixture
def eligible_user(
    enroll_user: Callable[..., Enrollment], give_ticket: Callable[..., Ticket]
) -> Callable[[int], int]:
    """Make a user hold a paid, in-person, hotel-included ticket; returns the user id"""

    def _make(user_id: int) -> int:
        give_ticket(enroll_user(user_id))
        return user_id

    return _make


@pytest.fixture
def room_occupancy_checker(store: InMemoryLodgingStore) -> RoomOccupancyChecker:
    return RoomOccupancyChecker(
        room_query_repo=InMemoryRoomQueryRepo(store),
        booking_query_repo=InMemoryBookingQueryRepo(store),
    )


@pytest.fixture
def ticket_eligibility_checker(store: InMemoryLodgingStore) -> TicketEligibilityChecker:
    return TicketEligibilityChecker(
        enrollment_query_repo=InMemoryEnrollmentQueryRepo(store),
        ticket_query_repo=InMemoryTicketQueryRepo(store),
    )


@pytest.fixture
def create_booking_use_case(
    store: InMemoryLodgingStore,
    room_occupancy_checker: RoomOccupancyChecker,
    ticket_eligibility_checker: TicketEligibilityChecker,
) -> CreateBookingUseCase:
    return CreateBookingUseCase(
        booking_command_repo=InMemoryBookingCommandRepo(store),
        booking_query_repo=InMemoryBookingQueryRepo(store),
        room_occupancy_checker=room_occupancy_checker,
        ticket_eligibility_checker=ticket_eligibility_checker,
    )


@pytest.fixture
def update_booking_room_use_case(
    store: InMemoryLodgingStore, room_occupancy_checker: RoomOccupancyChecker
) -> UpdateBookingRoomUseCase:
    return UpdateBookingRoomUseCase(
        booking_command_repo=InMemoryBookingCommandRepo(store),
        booking_query_repo=InMemoryBookingQueryRepo(store),
        room_occupancy_checker=room_occupancy_checker,
    )


@pytest.fixture
def get_booking_use_case(store: InMemoryLodgingStore) -> GetBookingUseCase:
    return GetBookingUseCase(booking_query_repo=InMemoryBookingQueryRepo(store))
