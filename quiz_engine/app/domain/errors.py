class QuizEngineError(Exception):
    """Base class for every error raised by the quiz use cases."""


class ValidationError(QuizEngineError):
    pass


class InvalidSolution(ValidationError):
    """An answer of the solution is not the number of one of the four options."""


class InvalidQuestionCount(ValidationError):
    """A quiz was submitted with a number of questions other than five."""


class QuizNotFound(QuizEngineError):
    pass


class AuthorizationError(QuizEngineError):
    pass


class NotOwner(AuthorizationError):
    """Only the quiz owner can delete a quiz."""


class OwnerCannotAttempt(AuthorizationError):
    """The quiz owner can't attempt their own quiz."""


class Unauthenticated(QuizEngineError):
    """The call was not signed by any account."""


class RatingTooLow(QuizEngineError):
    pass


class InsufficientBalance(QuizEngineError):
    """The attempting account can't pay the reward for its wrong answers."""


class AlreadyExists(QuizEngineError):
    """
    A quiz id is already taken in the store. Quiz ids come from a strictly increasing
    sequence, so this means the stored state is inconsistent.
    """
