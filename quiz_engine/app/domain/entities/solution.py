from pydantic import BaseModel, Field


"""
Solution Entity:
1. answer1..answer5 (int): One answer per question, in question order. Each answer is
the number of the chosen option. The type only limits answers to a byte, the [1, 4]
range is checked when a quiz is created.
The same model is used both for the answer key of a quiz and for a submission.
"""
class Solution(BaseModel):
    answer1: int = Field(ge=0, le=255)
    answer2: int = Field(ge=0, le=255)
    answer3: int = Field(ge=0, le=255)
    answer4: int = Field(ge=0, le=255)
    answer5: int = Field(ge=0, le=255)

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.answer1, self.answer2, self.answer3, self.answer4, self.answer5)

    @classmethod
    def from_answers(cls, answers) -> "Solution":
        answer1, answer2, answer3, answer4, answer5 = answers
        return cls(answer1=answer1, answer2=answer2, answer3=answer3,
                   answer4=answer4, answer5=answer5)
