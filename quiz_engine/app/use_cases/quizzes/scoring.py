from quiz_engine.app.domain.entities.solution import Solution


MAX_SCORE = 5


def find_score(submission: Solution, solution: Solution) -> int:
    """
    Counts the answers of the submission that match the solution at the same position.
    No partial credit, every question weighs the same.

    :param submission: The answers given by the attempting account.
    :param solution: The answer key of the quiz.
    :return: The score, from 0 to 5.
    """
    return sum(1 for given, expected in zip(submission.as_tuple(), solution.as_tuple())
               if given == expected)
