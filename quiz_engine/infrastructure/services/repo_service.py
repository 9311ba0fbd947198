# Repository service that holds the stores of one engine, whatever backend they use.
class RepoService:
    def __init__(self, quiz_repo, rating_repo, bucket_repo, sequence_repo,
                 redis_pool=None, sql_pool=None):
        self.quiz_repo = quiz_repo
        self.rating_repo = rating_repo
        self.bucket_repo = bucket_repo
        self.sequence_repo = sequence_repo
        self.redis_pool = redis_pool
        self.sql_pool = sql_pool

    async def close(self):
        if self.redis_pool is not None:
            await self.redis_pool.close_pool()
        if self.sql_pool is not None:
            await self.sql_pool.close_pool()
