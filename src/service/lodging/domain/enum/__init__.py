"""Lodging Domain Enums"""

from src.service.lodging.domain.enum.ticket_status import TicketStatus

__all__ = ['TicketStatus']
