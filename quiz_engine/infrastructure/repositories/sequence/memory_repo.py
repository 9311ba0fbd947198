from quiz_engine.app.domain.repositories_interfaces.sequence_repo import SequenceRepoInterface


class MemorySequenceRepo(SequenceRepoInterface):
    def __init__(self, latest: int = 0):
        self.latest = latest

    async def get_latest(self) -> int:
        return self.latest

    async def put(self, sequence: int) -> None:
        if sequence <= self.latest:
            raise ValueError(f"Sequence must grow, {sequence} after {self.latest}")
        self.latest = sequence
