"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.lodging.driven_adapter.model.address_model import AddressModel
from src.service.lodging.driven_adapter.model.booking_model import BookingModel
from src.service.lodging.driven_adapter.model.enrollment_model import EnrollmentModel
from src.service.lodging.driven_adapter.model.hotel_model import HotelModel
from src.service.lodging.driven_adapter.model.room_model import RoomModel
from src.service.lodging.driven_adapter.model.session_model import SessionModel
from src.service.lodging.driven_adapter.model.ticket_model import TicketModel
from src.service.lodging.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.lodging.driven_adapter.model.user_model import UserModel

__all__ = [
    'AddressModel',
    'BookingModel',
    'EnrollmentModel',
    'HotelModel',
    'RoomModel',
    'SessionModel',
    'TicketModel',
    'TicketTypeModel',
    'UserModel',
]
