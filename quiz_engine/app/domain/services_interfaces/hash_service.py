from abc import ABC, abstractmethod


class HashServiceInterface(ABC):
    @abstractmethod
    def hash_of(self, data: bytes) -> str:
        """
        Hashes the given bytes with a deterministic, collision resistant function.

        :param data: The encoded value to hash
        :return: The digest as a hex string
        """
        pass
