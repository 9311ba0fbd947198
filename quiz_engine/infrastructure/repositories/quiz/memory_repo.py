from quiz_engine.app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from quiz_engine.app.domain.entities.quiz import Quiz
from quiz_engine.app.domain.entities.solution import Solution
from quiz_engine.app.domain.errors import AlreadyExists
from typing import Optional


class MemoryQuizRepo(QuizRepoInterface):
    def __init__(self):
        self.quizzes: dict[str, Quiz] = {}
        self.solutions: dict[str, Solution] = {}

    async def create(self, quiz_id: str, quiz: Quiz, solution: Solution) -> None:
        if quiz_id in self.quizzes or quiz_id in self.solutions:
            raise AlreadyExists(f"Quiz {quiz_id} already exists")
        # Copies, so the caller can't change stored records through its own references
        self.quizzes[quiz_id] = quiz.model_copy(deep=True)
        self.solutions[quiz_id] = solution.model_copy()

    async def get(self, quiz_id: str) -> Optional[Quiz]:
        quiz = self.quizzes.get(quiz_id)
        return quiz.model_copy(deep=True) if quiz else None

    async def get_solution(self, quiz_id: str) -> Optional[Solution]:
        solution = self.solutions.get(quiz_id)
        return solution.model_copy() if solution else None

    async def delete(self, quiz_id: str) -> None:
        self.quizzes.pop(quiz_id, None)
        self.solutions.pop(quiz_id, None)
