from redis.asyncio import Redis


class RedisPool:
    def __init__(self, host: str, port: int, db: int):
        self.host = host
        self.port = port
        self.db = db
        self.pool = None

    async def create_pool(self):
        self.pool = await Redis(host=self.host, port=self.port, db=self.db)

    async def get_connection(self) -> Redis:
        if self.pool is None:
            raise RuntimeError("Redis pool is not created, call create_pool first")
        return self.pool.client()

    async def close_pool(self):
        if self.pool is None:
            return
        await self.pool.aclose()
        self.pool = None
