from quiz_engine.app.domain.services_interfaces.hash_service import HashServiceInterface


U64_MAX = 2 ** 64 - 1


def encode_u64(value: int) -> bytes:
    """
    Encodes an unsigned 64-bit integer as 8 little-endian bytes.

    :raises ValueError: if the value doesn't fit into u64.
    """
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{value} is out of the u64 range")
    return value.to_bytes(8, 'little')


class IdentifierDeriver:
    """
    Derives store keys from numbers. Quiz ids come from the quiz sequence number and
    bucket ids from the tick at which the bucket is due, so the same number always maps
    to the same id.
    """
    def __init__(self, hash_service: HashServiceInterface):
        self.hash_service = hash_service

    def derive_quiz_id(self, sequence: int) -> str:
        return self.hash_service.hash_of(encode_u64(sequence))

    def derive_bucket_id(self, tick: int) -> str:
        return self.hash_service.hash_of(encode_u64(tick))
