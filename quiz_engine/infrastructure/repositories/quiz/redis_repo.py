from quiz_engine.infrastructure.redis_config import RedisPool
from quiz_engine.app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from quiz_engine.app.domain.entities.quiz import Quiz
from quiz_engine.app.domain.entities.solution import Solution
from quiz_engine.app.domain.errors import AlreadyExists
from typing import Optional


class RedisQuizRepo(QuizRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def create(self, quiz_id: str, quiz: Quiz, solution: Solution) -> None:
        async with await self.redis_pool.get_connection() as conn:
            if await conn.exists(f'quiz:{quiz_id}', f'solution:{quiz_id}'):
                raise AlreadyExists(f"Quiz {quiz_id} already exists")
            # Quiz and solution are written in one transaction so neither exists without the other.
            # No expiry on the keys, the deletion scheduler removes them.
            async with conn.pipeline(transaction=True) as pipe:
                await (pipe.set(f'quiz:{quiz_id}', quiz.model_dump_json())
                           .set(f'solution:{quiz_id}', solution.model_dump_json())
                           .execute())

    async def get(self, quiz_id: str) -> Optional[Quiz]:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get(f'quiz:{quiz_id}')
            if data:
                return Quiz.model_validate_json(data)
            return None

    async def get_solution(self, quiz_id: str) -> Optional[Solution]:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get(f'solution:{quiz_id}')
            if data:
                return Solution.model_validate_json(data)
            return None

    async def delete(self, quiz_id: str) -> None:
        async with await self.redis_pool.get_connection() as conn:
            # DEL ignores missing keys, so deleting twice is harmless
            await conn.delete(f'quiz:{quiz_id}', f'solution:{quiz_id}')
