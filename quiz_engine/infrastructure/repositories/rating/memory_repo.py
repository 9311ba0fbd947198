from quiz_engine.app.domain.repositories_interfaces.rating_repo import RatingRepoInterface


class MemoryRatingRepo(RatingRepoInterface):
    def __init__(self):
        self.ratings: dict[str, int] = {}

    async def get(self, account: str) -> int:
        return self.ratings.get(account, 0)

    async def save(self, account: str, rating: int) -> None:
        self.ratings[account] = rating
