from abc import ABC, abstractmethod
from typing import Optional

from src.service.lodging.domain.entity.ticket_entity import Ticket


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        """Get the enrollment's ticket with its ticket type attached"""
        pass
