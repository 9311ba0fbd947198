from quiz_engine.infrastructure.redis_config import RedisPool
from quiz_engine.app.domain.repositories_interfaces.bucket_repo import BucketRepoInterface


class RedisBucketRepo(BucketRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def append(self, bucket_id: str, quiz_id: str) -> None:
        async with await self.redis_pool.get_connection() as conn:
            # RPUSH creates the list on first use
            await conn.rpush(f'bucket:{bucket_id}', quiz_id)

    async def get(self, bucket_id: str) -> list[str]:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.lrange(f'bucket:{bucket_id}', 0, -1)
            return [quiz_id.decode() for quiz_id in data]

    async def drain(self, bucket_id: str) -> list[str]:
        async with await self.redis_pool.get_connection() as conn:
            async with conn.pipeline(transaction=True) as pipe:
                data, _ = await (pipe.lrange(f'bucket:{bucket_id}', 0, -1)
                                     .delete(f'bucket:{bucket_id}')
                                     .execute())
            return [quiz_id.decode() for quiz_id in data]
