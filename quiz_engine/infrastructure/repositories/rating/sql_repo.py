from quiz_engine.app.domain.repositories_interfaces.rating_repo import RatingRepoInterface
from quiz_engine.infrastructure.aiomysql_config import MySQLPool


CREATE_TABLE = '''CREATE TABLE IF NOT EXISTS user_ratings (
    account_id VARCHAR(255) PRIMARY KEY,
    rating TINYINT UNSIGNED NOT NULL DEFAULT 0
)'''


class MySQLRatingRepo(RatingRepoInterface):
    def __init__(self, pool: MySQLPool):
        self.pool = pool

    async def create_table(self) -> None:
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(CREATE_TABLE)
                await conn.commit()

    async def get(self, account: str) -> int:
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute("SELECT rating FROM user_ratings WHERE account_id=%s", (account,))
                result = await cursor.fetchone()
                if result:
                    return int(result[0])
                return 0

    async def save(self, account: str, rating: int) -> None:
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(
                    '''INSERT INTO user_ratings (account_id, rating) VALUES (%s, %s)
                    ON DUPLICATE KEY UPDATE rating=VALUES(rating)''',
                    (account, rating)
                )
                await conn.commit()
