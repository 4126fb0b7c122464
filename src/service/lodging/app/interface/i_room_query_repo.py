from abc import ABC, abstractmethod
from typing import Optional

from src.service.lodging.domain.entity.room_entity import Room


class IRoomQueryRepo(ABC):
    """Repository interface for room read operations (rooms are owned by the hotel catalog)"""

    @abstractmethod
    async def get_by_id(self, *, room_id: int) -> Optional[Room]:
        pass
