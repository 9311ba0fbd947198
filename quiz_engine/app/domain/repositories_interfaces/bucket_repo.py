from abc import ABC, abstractmethod


class BucketRepoInterface(ABC):
    @abstractmethod
    async def append(self, bucket_id: str, quiz_id: str) -> None:
        """
        Appends a quiz id to the bucket, creating the bucket if it doesn't exist.
        """
        raise NotImplementedError

    @abstractmethod
    async def get(self, bucket_id: str) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    async def drain(self, bucket_id: str) -> list[str]:
        """
        Returns the content of the bucket and removes it, so the same bucket is never
        returned twice. A missing bucket gives an empty list.
        """
        raise NotImplementedError
