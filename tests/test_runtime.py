import pytest
from quiz_engine.app.domain.entities.call_context import CallContext
from quiz_engine.config.main_config import Settings
from quiz_engine.infrastructure.repositories.quiz.memory_repo import MemoryQuizRepo
from quiz_engine.infrastructure.repositories.quiz.redis_repo import RedisQuizRepo
from quiz_engine.infrastructure.repositories.rating.redis_repo import RedisRatingRepo
from quiz_engine.infrastructure.repositories.bucket.redis_repo import RedisBucketRepo
from quiz_engine.infrastructure.repositories.sequence.redis_repo import RedisSequenceRepo
from quiz_engine.infrastructure.services.repo_service import RepoService
from quiz_engine.presentation.runtime import TickDriver, build_engine, build_repo_service
from quiz_engine.presentation.utils import log_errors
from conftest import OWNER, make_questions, make_solution


@pytest.mark.asyncio
async def test_memory_backend_by_default(settings):
    repo_service = await build_repo_service(settings)
    assert isinstance(repo_service.quiz_repo, MemoryQuizRepo)
    assert repo_service.redis_pool is None
    assert repo_service.sql_pool is None


@pytest.mark.asyncio
async def test_engine_runs_on_redis_repos(redis_pool, clock, ledger):
    repo_service = RepoService(quiz_repo=RedisQuizRepo(redis_pool),
                               rating_repo=RedisRatingRepo(redis_pool),
                               bucket_repo=RedisBucketRepo(redis_pool),
                               sequence_repo=RedisSequenceRepo(redis_pool),
                               redis_pool=redis_pool)
    engine = await build_engine(Settings(log_file=None), repo_service=repo_service, clock=clock, ledger=ledger)
    use_cases = engine.quiz_use_cases

    sequence = await use_cases.create_quiz(CallContext.signed(OWNER), make_questions(), make_solution(), 1)
    assert await use_cases.attempt_quiz(CallContext.signed('bob'), sequence, make_solution()) == 5
    assert await use_cases.get_user_rating('bob') == 5
    assert redis_pool.data['quiz_sequence'] == b'1'

    assert len(await use_cases.on_tick(110)) == 1
    assert await use_cases.get_quiz(sequence) is None

    await engine.close()
    assert redis_pool.closed


@pytest.mark.asyncio
async def test_driver_step_advances_clock_and_deletes(engine, clock):
    await engine.quiz_use_cases.create_quiz(CallContext.signed(OWNER), make_questions(), make_solution(), 0)
    driver = TickDriver(engine, tick_seconds=0.001)
    for _ in range(9):
        await driver.step()
    assert clock.current_tick() == 109
    assert await engine.quiz_use_cases.get_quiz(1) is not None
    assert await driver.step() == 110
    assert await engine.quiz_use_cases.get_quiz(1) is None


@pytest.mark.asyncio
async def test_driver_run_stops_after_max_ticks(engine, clock):
    await TickDriver(engine, tick_seconds=0.001).run(max_ticks=3)
    assert clock.current_tick() == 103


@pytest.mark.asyncio
async def test_driver_run_reraises_tick_failure(engine):
    async def broken(tick):
        raise RuntimeError('store is down')
    engine.quiz_use_cases.on_tick = broken
    with pytest.raises(RuntimeError):
        await TickDriver(engine, tick_seconds=0.001).run(max_ticks=1)


@pytest.mark.asyncio
async def test_log_errors_keeps_function_metadata():
    @log_errors
    async def answer():
        return 42
    assert answer.__name__ == 'answer'
    assert await answer() == 42
