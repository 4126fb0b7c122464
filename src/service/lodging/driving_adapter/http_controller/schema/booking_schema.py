from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.platform.database.orm_db_setting import is_storable_id


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingRoomRequest(CamelModel):
    """Body of both POST /booking and PUT /booking/{bookingId}"""

    model_config = ConfigDict(json_schema_extra={'example': {'roomId': 1}})

    # Absent or out-of-range ids fall through to the room lookup and yield 404
    room_id: Optional[int] = None

    @property
    def room_id_or_zero(self) -> int:
        return self.room_id if self.room_id and is_storable_id(self.room_id) else 0


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'userId': 2,
                'roomId': 3,
                'createdAt': '2025-01-10T10:30:00Z',
                'updatedAt': '2025-01-10T10:30:00Z',
            }
        },
    )

    id: int
    user_id: int
    room_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingWithRoomResponse(BookingResponse):
    room: RoomResponse = Field(alias='Room')
