from abc import ABC, abstractmethod


class ISessionQueryRepo(ABC):
    @abstractmethod
    async def exists(self, *, token: str) -> bool:
        """Whether a login session was issued for this token"""
        pass
