from pydantic import BaseModel, ConfigDict


"""
Question Entity:
1. statement (str): The text of the question.
2. option1..option4 (str): The four answer options. Answers in a Solution refer to
them by their number, so option1 is answered with 1 and option4 with 4.
A question has no identity of its own, it only exists inside a Quiz.
"""
class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    statement: str
    option1: str
    option2: str
    option3: str
    option4: str
