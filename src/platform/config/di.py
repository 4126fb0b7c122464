"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.lodging.app.service.room_occupancy_checker import RoomOccupancyChecker
from src.service.lodging.app.service.ticket_eligibility_checker import TicketEligibilityChecker
from src.service.lodging.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.lodging.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.lodging.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from src.service.lodging.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl
from src.service.lodging.driven_adapter.repo.session_query_repo_impl import SessionQueryRepoImpl
from src.service.lodging.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from src.service.lodging.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine + session factory, built from config_service)
    database = providers.Singleton(Database, db_url=config_service.provided.DATABASE_URL_ASYNC)

    # Repositories (stateless - use session_factory per-request)
    room_query_repo = providers.Singleton(
        RoomQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    enrollment_query_repo = providers.Singleton(
        EnrollmentQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    session_query_repo = providers.Singleton(
        SessionQueryRepoImpl, session_factory=database.provided.session
    )

    # Domain services
    room_occupancy_checker = providers.Singleton(
        RoomOccupancyChecker,
        room_query_repo=room_query_repo,
        booking_query_repo=booking_query_repo,
    )
    ticket_eligibility_checker = providers.Singleton(
        TicketEligibilityChecker,
        enrollment_query_repo=enrollment_query_repo,
        ticket_query_repo=ticket_query_repo,
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth, session_query_repo=session_query_repo)


container = Container()
