from datetime import datetime
from typing import Optional

import attrs

from src.service.lodging.domain.enum.ticket_status import TicketStatus


@attrs.define(frozen=True)
class TicketType:
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class Ticket:
    enrollment_id: int
    ticket_type_id: int
    status: TicketStatus = attrs.field(validator=attrs.validators.instance_of(TicketStatus))
    ticket_type: Optional[TicketType] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_paid(self) -> bool:
        return self.status != TicketStatus.RESERVED

    def is_in_person(self) -> bool:
        return self.ticket_type is not None and not self.ticket_type.is_remote

    def includes_hotel(self) -> bool:
        return self.ticket_type is not None and self.ticket_type.includes_hotel
