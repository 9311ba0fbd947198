from quiz_engine.app.domain.repositories_interfaces.rating_repo import RatingRepoInterface
from quiz_engine.app.use_cases.quizzes.scoring import MAX_SCORE
from typing import Optional
import logging


logger = logging.getLogger('use_cases')

# Weight of the previous rating against the latest score once the account has a rating
HISTORY_WEIGHT = 5


class RatingUseCases:
    def __init__(self, repo: RatingRepoInterface):
        self.repo = repo

    async def get(self, account: str) -> int:
        return await self.repo.get(account)

    async def update(self, account: str, score: int, prior: Optional[int] = None) -> int:
        """
        Blends the latest score into the rating of the account.

        An account without rating takes its first score as rating. After that the
        previous rating weighs 5:1 against the new score:
        new_rating = (old_rating * 5 + score) // 6

        :param account: The rated account.
        :param score: The score of the latest attempt, from 0 to 5.
        :param prior: The rating to blend from. Read from the repo when not given.
        :return: The new rating.
        """
        if not 0 <= score <= MAX_SCORE:
            raise ValueError(f"Score must be between 0 and {MAX_SCORE}, got {score}")
        if prior is None:
            prior = await self.repo.get(account)
        divisor = 1 if prior == 0 else HISTORY_WEIGHT + 1
        rating = (prior * HISTORY_WEIGHT + score) // divisor
        await self.repo.save(account, rating)
        logger.info("RATING %s -> %s", prior, rating, extra={'user': account})
        return rating
