from quiz_engine.app.domain.repositories_interfaces.bucket_repo import BucketRepoInterface


class MemoryBucketRepo(BucketRepoInterface):
    def __init__(self):
        self.buckets: dict[str, list[str]] = {}

    async def append(self, bucket_id: str, quiz_id: str) -> None:
        self.buckets.setdefault(bucket_id, []).append(quiz_id)

    async def get(self, bucket_id: str) -> list[str]:
        return list(self.buckets.get(bucket_id, []))

    async def drain(self, bucket_id: str) -> list[str]:
        return self.buckets.pop(bucket_id, [])
