from pydantic import BaseModel
from typing import Literal, Union


"""
Events emitted by the quiz use cases:
1. QuizCreated: a new quiz was created. [sequence, account, rating]
2. QuizScored: a score was generated after attempting a quiz. [sequence, account, score]
3. QuizDeleted: a scheduled quiz was deleted at the given tick. [tick]
"""
class QuizCreated(BaseModel):
    kind: Literal['quiz_created'] = 'quiz_created'
    sequence: int
    account: str
    rating: int


class QuizScored(BaseModel):
    kind: Literal['quiz_scored'] = 'quiz_scored'
    sequence: int
    account: str
    score: int


class QuizDeleted(BaseModel):
    kind: Literal['quiz_deleted'] = 'quiz_deleted'
    tick: int


Event = Union[QuizCreated, QuizScored, QuizDeleted]
