import aiomysql


class MySQLPool:
    def __init__(self, host: str, port: int, user: str, password: str, db: str):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.pool = None

    async def create_pool(self):
        self.pool = await aiomysql.create_pool(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            db=self.db,
        )

    async def close_pool(self):
        if self.pool is None:
            return
        self.pool.close()
        await self.pool.wait_closed()
        self.pool = None

    def acquire(self):
        # Context manager that gives the connection back to the pool on exit
        if self.pool is None:
            raise RuntimeError("MySQL pool is not created, call create_pool first")
        return self.pool.acquire()
