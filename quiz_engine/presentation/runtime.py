from quiz_engine.app.use_cases.identifiers import IdentifierDeriver
from quiz_engine.app.use_cases.quizzes.deletion_scheduler import DeletionScheduler
from quiz_engine.app.use_cases.quizzes.quiz_use_cases import QuizUseCases
from quiz_engine.app.use_cases.ratings.rating_use_cases import RatingUseCases
from quiz_engine.config.logging_config import configure_logging
from quiz_engine.config.main_config import Settings
from quiz_engine.infrastructure.aiomysql_config import MySQLPool
from quiz_engine.infrastructure.redis_config import RedisPool
from quiz_engine.infrastructure.repositories.bucket.memory_repo import MemoryBucketRepo
from quiz_engine.infrastructure.repositories.bucket.redis_repo import RedisBucketRepo
from quiz_engine.infrastructure.repositories.quiz.memory_repo import MemoryQuizRepo
from quiz_engine.infrastructure.repositories.quiz.redis_repo import RedisQuizRepo
from quiz_engine.infrastructure.repositories.rating.memory_repo import MemoryRatingRepo
from quiz_engine.infrastructure.repositories.rating.redis_repo import RedisRatingRepo
from quiz_engine.infrastructure.repositories.rating.sql_repo import MySQLRatingRepo
from quiz_engine.infrastructure.repositories.sequence.memory_repo import MemorySequenceRepo
from quiz_engine.infrastructure.repositories.sequence.redis_repo import RedisSequenceRepo
from quiz_engine.infrastructure.services.clock import ManualClock
from quiz_engine.infrastructure.services.event_sink import LoggingEventSink
from quiz_engine.infrastructure.services.hash_service import Blake2HashService
from quiz_engine.infrastructure.services.ledger_service import MemoryLedgerService
from quiz_engine.infrastructure.services.origin_resolver import SignedOriginResolver
from quiz_engine.infrastructure.services.repo_service import RepoService
from quiz_engine.presentation.utils import log_errors
from typing import Optional
import asyncio
import logging


logger = logging.getLogger('runtime')


class Engine:
    def __init__(self, quiz_use_cases: QuizUseCases, repo_service: RepoService,
                 clock: ManualClock, ledger: MemoryLedgerService, event_sink: LoggingEventSink):
        self.quiz_use_cases = quiz_use_cases
        self.repo_service = repo_service
        self.clock = clock
        self.ledger = ledger
        self.event_sink = event_sink

    async def close(self):
        await self.repo_service.close()


async def build_repo_service(settings: Settings) -> RepoService:
    redis_pool = None
    sql_pool = None
    rating_backend = settings.effective_rating_backend

    if settings.storage_backend == 'redis' or rating_backend == 'redis':
        redis_pool = RedisPool(host=settings.redis_host, port=settings.redis_port, db=settings.redis_db)
        await redis_pool.create_pool()
    if rating_backend == 'mysql':
        sql_pool = MySQLPool(host=settings.db_host, port=settings.db_port, user=settings.db_user,
                             password=settings.db_password, db=settings.db_name)
        await sql_pool.create_pool()

    if settings.storage_backend == 'redis':
        quiz_repo = RedisQuizRepo(redis_pool)
        bucket_repo = RedisBucketRepo(redis_pool)
        sequence_repo = RedisSequenceRepo(redis_pool)
    else:
        quiz_repo = MemoryQuizRepo()
        bucket_repo = MemoryBucketRepo()
        sequence_repo = MemorySequenceRepo()

    if rating_backend == 'mysql':
        rating_repo = MySQLRatingRepo(sql_pool)
        await rating_repo.create_table()
    elif rating_backend == 'redis':
        rating_repo = RedisRatingRepo(redis_pool)
    else:
        rating_repo = MemoryRatingRepo()

    return RepoService(quiz_repo=quiz_repo, rating_repo=rating_repo, bucket_repo=bucket_repo,
                       sequence_repo=sequence_repo, redis_pool=redis_pool, sql_pool=sql_pool)


async def build_engine(settings: Settings, repo_service: Optional[RepoService] = None,
                       clock: Optional[ManualClock] = None,
                       ledger: Optional[MemoryLedgerService] = None) -> Engine:
    if repo_service is None:
        repo_service = await build_repo_service(settings)
    clock = clock or ManualClock()
    ledger = ledger or MemoryLedgerService()
    event_sink = LoggingEventSink()
    identifiers = IdentifierDeriver(Blake2HashService())

    quiz_use_cases = QuizUseCases(
        quiz_repo=repo_service.quiz_repo,
        sequence_repo=repo_service.sequence_repo,
        ratings=RatingUseCases(repo_service.rating_repo),
        scheduler=DeletionScheduler(repo_service.bucket_repo, identifiers, settings.deletion_delay),
        identifiers=identifiers,
        ledger=ledger,
        event_sink=event_sink,
        origin_resolver=SignedOriginResolver(),
        clock=clock,
        tokens_per_question=settings.tokens_per_question,
        validate_all_answers=settings.validate_all_answers,
    )
    return Engine(quiz_use_cases, repo_service, clock, ledger, event_sink)


class TickDriver:
    """
    Advances the clock every `tick_seconds` and runs the deletion hook once for every
    new tick. A failing tick stops the driver.
    """
    def __init__(self, engine: Engine, tick_seconds: float):
        self.engine = engine
        self.tick_seconds = tick_seconds

    async def step(self) -> int:
        tick = self.engine.clock.advance()
        deleted = await self.engine.quiz_use_cases.on_tick(tick)
        if deleted:
            logger.info("TICK %s DELETED %s QUIZZES", tick, len(deleted))
        return tick

    @log_errors
    async def run(self, max_ticks: Optional[int] = None) -> None:
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            await asyncio.sleep(self.tick_seconds)
            await self.step()
            ticks += 1


async def main(settings: Optional[Settings] = None):
    settings = settings or Settings.from_env()
    configure_logging(settings.log_file)
    engine = await build_engine(settings)
    logger.info("ENGINE STARTED WITH %s STORAGE, DELETION DELAY %s",
                settings.storage_backend, settings.deletion_delay)
    try:
        await TickDriver(engine, settings.tick_seconds).run()
    finally:
        await engine.close()


def run():
    asyncio.run(main())


if __name__ == '__main__':
    run()
