import pytest
import pytest_asyncio
from quiz_engine.app.domain.entities.question import Question
from quiz_engine.app.domain.entities.solution import Solution
from quiz_engine.config.main_config import Settings
from quiz_engine.infrastructure.services.clock import ManualClock
from quiz_engine.infrastructure.services.ledger_service import MemoryLedgerService
from quiz_engine.presentation.runtime import build_engine


OWNER = 'alice'
PLAYER = 'bob'
OTHER = 'carol'


def make_questions(count=5):
    return [Question(statement=f'Question {i}', option1='a', option2='b', option3='c', option4='d')
            for i in range(1, count + 1)]


def make_solution(*answers):
    return Solution.from_answers(answers or (1, 2, 3, 4, 1))


class FakeRedisPipeline:
    def __init__(self, conn):
        self.conn = conn
        self.commands = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.commands = []

    def set(self, key, value):
        self.commands.append(('set', key, value))
        return self

    def lrange(self, key, start, end):
        self.commands.append(('lrange', key, start, end))
        return self

    def delete(self, *keys):
        self.commands.append(('delete', *keys))
        return self

    async def execute(self):
        results = []
        for name, *args in self.commands:
            results.append(await getattr(self.conn, name)(*args))
        self.commands = []
        return results


class FakeRedisConnection:
    """Keeps values as bytes, like a redis client without decode_responses."""
    def __init__(self, data):
        self.data = data

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        pass

    def pipeline(self, transaction=True):
        return FakeRedisPipeline(self)

    async def exists(self, *keys):
        return sum(1 for key in keys if key in self.data)

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = str(value).encode()
        return True

    async def delete(self, *keys):
        return sum(1 for key in keys if self.data.pop(key, None) is not None)

    async def rpush(self, key, value):
        self.data.setdefault(key, []).append(str(value).encode())
        return len(self.data[key])

    async def lrange(self, key, start, end):
        values = self.data.get(key, [])
        return list(values[start:] if end == -1 else values[start:end + 1])


class FakeRedisPool:
    def __init__(self):
        self.data = {}
        self.closed = False

    async def get_connection(self):
        return FakeRedisConnection(self.data)

    async def close_pool(self):
        self.closed = True


@pytest.fixture
def redis_pool():
    return FakeRedisPool()


@pytest.fixture
def clock():
    return ManualClock(tick=100)


@pytest.fixture
def ledger():
    return MemoryLedgerService({OWNER: 1000, PLAYER: 1000, OTHER: 1000}, existential_deposit=1)


@pytest.fixture
def settings():
    return Settings(deletion_delay=10, tokens_per_question=10, log_file=None)


@pytest_asyncio.fixture
async def engine(settings, clock, ledger):
    return await build_engine(settings, clock=clock, ledger=ledger)
