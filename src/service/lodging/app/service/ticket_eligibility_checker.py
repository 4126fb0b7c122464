from src.platform.exception.exceptions import TicketIneligibleError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.lodging.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.lodging.domain.entity.ticket_entity import Ticket


class TicketEligibilityChecker:
    """
    Decides whether a user's event ticket entitles them to a hotel room.

    All of these must hold, otherwise TicketIneligibleError (HTTP 403):
    1. the user has an enrollment (loaded with its address data)
    2. the enrollment has a ticket
    3. the ticket is not RESERVED (i.e. it is PAID)
    4. the ticket type is not remote
    5. the ticket type includes hotel
    """

    def __init__(
        self, *, enrollment_query_repo: IEnrollmentQueryRepo, ticket_query_repo: ITicketQueryRepo
    ):
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo

    @Logger.io
    async def check_eligibility(self, *, user_id: int) -> Ticket:
        enrollment = await self.enrollment_query_repo.get_with_address_by_user_id(user_id=user_id)
        if not enrollment or enrollment.id is None:
            raise TicketIneligibleError('User has no enrollment')

        ticket = await self.ticket_query_repo.get_by_enrollment_id(enrollment_id=enrollment.id)
        if not ticket:
            raise TicketIneligibleError('User has no ticket')
        if not ticket.is_paid():
            raise TicketIneligibleError('Ticket is not paid')
        if not ticket.is_in_person():
            raise TicketIneligibleError('Remote ticket does not include hotel')
        if not ticket.includes_hotel():
            raise TicketIneligibleError('Ticket type does not include hotel')

        Logger.base.info(
            f'🎫 [ELIGIBILITY] user {user_id} eligible with ticket {ticket.id} '
            f'(type {ticket.ticket_type_id})'
        )
        return ticket
