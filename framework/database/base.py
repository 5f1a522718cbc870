from abc import ABC, abstractmethod

class BaseDatabaseDriver(ABC):
    """Lifecycle contract shared by storage drivers."""

    @abstractmethod
    async def connect(self) -> None:
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        pass
