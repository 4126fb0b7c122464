"""Application layer DTOs"""

from src.service.lodging.app.dto.room_availability import RoomAvailability

__all__ = ['RoomAvailability']
