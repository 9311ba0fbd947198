from quiz_engine.infrastructure.redis_config import RedisPool
from quiz_engine.app.domain.repositories_interfaces.rating_repo import RatingRepoInterface


class RedisRatingRepo(RatingRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def get(self, account: str) -> int:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get(f'rating:{account}')
            # Accounts that never attempted a quiz have no key
            return int(data) if data is not None else 0

    async def save(self, account: str, rating: int) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(f'rating:{account}', rating)
