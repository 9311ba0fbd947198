from quiz_engine.infrastructure.redis_config import RedisPool
from quiz_engine.app.domain.repositories_interfaces.sequence_repo import SequenceRepoInterface


class RedisSequenceRepo(SequenceRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def get_latest(self) -> int:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get('quiz_sequence')
            return int(data) if data is not None else 0

    async def put(self, sequence: int) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set('quiz_sequence', sequence)
