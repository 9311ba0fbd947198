from abc import ABC, abstractmethod


class SequenceRepoInterface(ABC):
    @abstractmethod
    async def get_latest(self) -> int:
        """
        Returns the sequence number of the latest created quiz, 0 before the first one.
        """
        raise NotImplementedError

    @abstractmethod
    async def put(self, sequence: int) -> None:
        raise NotImplementedError
