from quiz_engine.app.domain.repositories_interfaces.bucket_repo import BucketRepoInterface
from quiz_engine.app.use_cases.identifiers import IdentifierDeriver
import logging


logger = logging.getLogger('use_cases')


class DeletionScheduler:
    def __init__(self, bucket_repo: BucketRepoInterface, identifiers: IdentifierDeriver, delay: int):
        if delay < 1:
            raise ValueError("Deletion delay must be at least one tick")
        self.bucket_repo = bucket_repo
        self.identifiers = identifiers
        self.delay = delay

    async def schedule(self, current_tick: int, quiz_id: str) -> int:
        """
        Puts the quiz into the bucket that fires `delay` ticks from now.

        Buckets only hold quiz ids. The quiz may be deleted by its owner before the
        bucket fires, so whoever consumes the bucket must tolerate missing quizzes.

        :param current_tick: The tick at which the quiz was created.
        :param quiz_id: The id of the quiz to delete later.
        :return: The tick at which the quiz is due for deletion.
        """
        due_tick = current_tick + self.delay
        await self.bucket_repo.append(self.identifiers.derive_bucket_id(due_tick), quiz_id)
        logger.info("SCHEDULED QUIZ %s FOR TICK %s", quiz_id, due_tick)
        return due_tick

    async def fire(self, current_tick: int) -> list[str]:
        """
        Drains the bucket that is due at the current tick. The bucket is removed, so
        firing the same tick again returns nothing.

        :param current_tick: The tick that just started.
        :return: The quiz ids that were scheduled for this tick, in scheduling order.
        """
        quiz_ids = await self.bucket_repo.drain(self.identifiers.derive_bucket_id(current_tick))
        if quiz_ids:
            logger.info("BUCKET FOR TICK %s FIRED WITH %s QUIZZES", current_tick, len(quiz_ids))
        return quiz_ids

    async def pending(self, tick: int) -> list[str]:
        return await self.bucket_repo.get(self.identifiers.derive_bucket_id(tick))
