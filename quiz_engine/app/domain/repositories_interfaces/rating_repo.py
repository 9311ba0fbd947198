from abc import ABC, abstractmethod


class RatingRepoInterface(ABC):
    @abstractmethod
    async def get(self, account: str) -> int:
        """
        Returns the rating of the account, 0 if it has never been rated.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, account: str, rating: int) -> None:
        raise NotImplementedError
