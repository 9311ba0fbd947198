from pydantic import BaseModel, Field
from typing import Literal, Mapping, Optional
import os


TEST_DELETION_DELAY = 10
# One day of 6 second ticks
PRODUCTION_DELETION_DELAY = 14400


def _flag(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Settings(BaseModel):
    storage_backend: Literal['memory', 'redis'] = 'memory'
    # None means the ratings are kept with the rest of the storage
    rating_backend: Optional[Literal['memory', 'redis', 'mysql']] = None

    redis_host: str = 'localhost'
    redis_port: int = 6379
    redis_db: int = 0

    db_host: str = 'localhost'
    db_port: int = 3306
    db_user: str = 'quiz'
    db_password: str = ''
    db_name: str = 'quiz_engine'

    deletion_delay: int = Field(default=TEST_DELETION_DELAY, ge=1)
    tokens_per_question: int = Field(default=10, ge=0)
    validate_all_answers: bool = False
    tick_seconds: float = Field(default=6.0, gt=0)
    log_file: Optional[str] = 'quiz_engine.log'

    @property
    def effective_rating_backend(self) -> str:
        return self.rating_backend or self.storage_backend

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Reads the settings from QUIZ_*, REDIS_* and DB_* environment variables.
        Variables that are not set keep their defaults.
        """
        env = os.environ if environ is None else environ
        names = {
            'storage_backend': 'QUIZ_STORAGE_BACKEND',
            'rating_backend': 'QUIZ_RATING_BACKEND',
            'redis_host': 'REDIS_HOST',
            'redis_port': 'REDIS_PORT',
            'redis_db': 'REDIS_DB',
            'db_host': 'DB_HOST',
            'db_port': 'DB_PORT',
            'db_user': 'DB_USER',
            'db_password': 'DB_PASSWORD',
            'db_name': 'DB_NAME',
            'deletion_delay': 'QUIZ_DELETION_DELAY',
            'tokens_per_question': 'QUIZ_TOKENS_PER_QUESTION',
            'tick_seconds': 'QUIZ_TICK_SECONDS',
            'log_file': 'QUIZ_LOG_FILE',
        }
        values = {field: env[name] for field, name in names.items() if env.get(name)}
        if env.get('QUIZ_VALIDATE_ALL_ANSWERS'):
            values['validate_all_answers'] = _flag(env['QUIZ_VALIDATE_ALL_ANSWERS'])
        return cls.model_validate(values)
