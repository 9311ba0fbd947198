from quiz_engine.app.domain.services_interfaces.hash_service import HashServiceInterface
import hashlib


class Blake2HashService(HashServiceInterface):
    def __init__(self, digest_size: int = 32):
        self.digest_size = digest_size

    def hash_of(self, data: bytes) -> str:
        return hashlib.blake2b(data, digest_size=self.digest_size).hexdigest()


class Sha256HashService(HashServiceInterface):
    def hash_of(self, data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()
