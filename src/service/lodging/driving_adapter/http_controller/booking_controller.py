from typing import Optional

from fastapi import APIRouter, Depends, status

from src.platform.database.orm_db_setting import MAX_INTEGER_ID, is_storable_id
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.lodging.app.command.update_booking_room_use_case import (
    UpdateBookingRoomUseCase,
)
from src.service.lodging.app.query.get_booking_use_case import GetBookingUseCase
from src.service.lodging.domain.entity.booking_entity import Booking
from src.service.lodging.driving_adapter.http_controller.auth.current_user import (
    get_current_user_id,
)
from src.service.lodging.driving_adapter.http_controller.schema.booking_schema import (
    BookingResponse,
    BookingRoomRequest,
    BookingWithRoomResponse,
    RoomResponse,
)


router = APIRouter()


def _parse_booking_id(raw_booking_id: str) -> int:
    # Anything outside the stored id range cannot name an existing booking
    if not (raw_booking_id.isascii() and raw_booking_id.isdigit()):
        raise NotFoundError('Booking not found')
    # Overlong digit strings are out of range and would hit int()'s digit limit
    if len(raw_booking_id.lstrip('0')) > len(str(MAX_INTEGER_ID)):
        raise NotFoundError('Booking not found')
    booking_id = int(raw_booking_id)
    if not is_storable_id(booking_id):
        raise NotFoundError('Booking not found')
    return booking_id


def _to_booking_response(booking: Booking) -> BookingResponse:
    if booking.id is None:
        raise ValueError('Booking ID should not be None after persisting.')

    return BookingResponse(
        id=booking.id,
        user_id=booking.user_id,
        room_id=booking.room_id,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingWithRoomResponse:
    booking = await use_case.get_booking(user_id=user_id)
    if booking.id is None or booking.room is None:
        raise NotFoundError('Booking not found')

    room = booking.room
    return BookingWithRoomResponse(
        id=booking.id,
        user_id=booking.user_id,
        room_id=booking.room_id,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
        room=RoomResponse(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            hotel_id=room.hotel_id,
            created_at=room.created_at,
            updated_at=room.updated_at,
        ),
    )


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: Optional[BookingRoomRequest] = None,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    room_id = request.room_id_or_zero if request else 0
    booking = await use_case.create_booking(user_id=user_id, room_id=room_id)
    return _to_booking_response(booking)


@router.put('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_booking(
    booking_id: str,
    request: Optional[BookingRoomRequest] = None,
    user_id: int = Depends(get_current_user_id),
    use_case: UpdateBookingRoomUseCase = Depends(UpdateBookingRoomUseCase.depends),
) -> BookingResponse:
    room_id = request.room_id_or_zero if request else 0
    booking = await use_case.update_booking(
        user_id=user_id, booking_id=_parse_booking_id(booking_id), room_id=room_id
    )
    return _to_booking_response(booking)
