from quiz_engine.app.domain.entities.quiz import Quiz
from quiz_engine.app.domain.entities.solution import Solution
from abc import ABC, abstractmethod
from typing import Optional


class QuizRepoInterface(ABC):
    @abstractmethod
    async def create(self, quiz_id: str, quiz: Quiz, solution: Solution) -> None:
        """
        Stores a quiz together with its solution under the same id.

        :raises AlreadyExists: if the id is already present.
        """
        raise NotImplementedError

    @abstractmethod
    async def get(self, quiz_id: str) -> Optional[Quiz]:
        raise NotImplementedError

    @abstractmethod
    async def get_solution(self, quiz_id: str) -> Optional[Solution]:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, quiz_id: str) -> None:
        """
        Removes both the quiz and its solution. Deleting a missing id is a no-op.
        """
        raise NotImplementedError
