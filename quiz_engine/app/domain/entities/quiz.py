from pydantic import BaseModel, Field
from quiz_engine.app.domain.entities.question import Question


QUESTIONS_PER_QUIZ = 5

"""
Quiz Entity:
1. owner (str): Account of the user who created the quiz. Only the owner can delete it
and the owner can't attempt it.
2. questions (list[Question]): Exactly five questions. The order matters because the
n-th answer of a Solution belongs to the n-th question.
3. rating (int): The rating gate of the quiz, the minimum rating (with one point of
tolerance) an account needs to attempt it. Limited to a byte.
The quiz id is not stored in the entity. It is derived from the quiz sequence number
and is used as the key of the quiz and of its solution in the store.
"""
class Quiz(BaseModel):
    owner: str
    questions: list[Question] = Field(min_length=QUESTIONS_PER_QUIZ, max_length=QUESTIONS_PER_QUIZ)
    rating: int = Field(default=0, ge=0, le=255)
