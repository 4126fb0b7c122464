from datetime import datetime
from typing import Optional

import attrs


def _validate_positive_capacity(instance: 'Room', attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError(f'{attribute.name} must be positive, got {value}')


@attrs.define(frozen=True)
class Room:
    id: int
    name: str
    capacity: int = attrs.field(
        validator=[attrs.validators.instance_of(int), _validate_positive_capacity]
    )
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_full(self, occupancy: int) -> bool:
        return occupancy >= self.capacity
