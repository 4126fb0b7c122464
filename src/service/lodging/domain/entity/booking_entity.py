from datetime import datetime
from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.lodging.domain.entity.room_entity import Room


@attrs.define
class Booking:
    user_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    room_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    room: Optional[Room] = None  # only attached by reads that join the room

    @classmethod
    @Logger.io
    def create(cls, *, user_id: int, room_id: int) -> 'Booking':
        # id and timestamps are assigned when the booking is persisted
        return cls(user_id=user_id, room_id=room_id)

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    @Logger.io
    def move_to_room(self, room_id: int) -> 'Booking':
        # id and user_id stay, the previously attached room no longer applies
        return attrs.evolve(self, room_id=room_id, room=None)
