from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.lodging.domain.entity.ticket_entity import Ticket, TicketType
from src.service.lodging.domain.enum.ticket_status import TicketStatus
from src.service.lodging.driven_adapter.model.ticket_model import TicketModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError('No session_factory available')
        async with self.session_factory() as session:
            yield session

    @staticmethod
    def _to_entity(db_ticket: TicketModel) -> Ticket:
        db_type = db_ticket.ticket_type
        return Ticket(
            id=db_ticket.id,
            enrollment_id=db_ticket.enrollment_id,
            ticket_type_id=db_ticket.ticket_type_id,
            status=TicketStatus(db_ticket.status),
            ticket_type=TicketType(
                id=db_type.id,
                name=db_type.name,
                price=db_type.price,
                is_remote=db_type.is_remote,
                includes_hotel=db_type.includes_hotel,
                created_at=db_type.created_at,
                updated_at=db_type.updated_at,
            ),
            created_at=db_ticket.created_at,
            updated_at=db_ticket.updated_at,
        )

    @Logger.io
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketModel)
                .options(selectinload(TicketModel.ticket_type))
                .where(TicketModel.enrollment_id == enrollment_id)
            )
            db_ticket = result.scalar_one_or_none()

            if not db_ticket:
                return None

            return TicketQueryRepoImpl._to_entity(db_ticket)
