from quiz_engine.app.domain.entities.call_context import CallContext
from quiz_engine.app.domain.entities.events import Event, QuizCreated, QuizDeleted, QuizScored
from quiz_engine.app.domain.entities.question import Question
from quiz_engine.app.domain.entities.quiz import Quiz, QUESTIONS_PER_QUIZ
from quiz_engine.app.domain.entities.solution import Solution
from quiz_engine.app.domain.errors import (AlreadyExists, InsufficientBalance, InvalidQuestionCount,
                                           InvalidSolution, NotOwner, OwnerCannotAttempt,
                                           QuizNotFound, RatingTooLow)
from quiz_engine.app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from quiz_engine.app.domain.repositories_interfaces.sequence_repo import SequenceRepoInterface
from quiz_engine.app.domain.services_interfaces.clock import ClockInterface
from quiz_engine.app.domain.services_interfaces.event_sink import EventSinkInterface
from quiz_engine.app.domain.services_interfaces.ledger_service import InsufficientFunds, LedgerServiceInterface
from quiz_engine.app.domain.services_interfaces.origin_resolver import OriginResolverInterface
from quiz_engine.app.use_cases.identifiers import IdentifierDeriver
from quiz_engine.app.use_cases.quizzes.deletion_scheduler import DeletionScheduler
from quiz_engine.app.use_cases.quizzes.scoring import MAX_SCORE, find_score
from quiz_engine.app.use_cases.ratings.rating_use_cases import RatingUseCases
from typing import Optional
import asyncio
import logging


logger = logging.getLogger('use_cases')

MIN_OPTION = 1
MAX_OPTION = 4


class QuizUseCases:
    """
    Creates, attempts and deletes quizzes and runs the scheduled deletions on every tick.

    All mutating operations go through one lock, so they are applied one at a time in
    the order they were admitted, on_tick included. An operation that fails leaves the
    stores and the ledger as they were.
    """
    def __init__(self,
                 quiz_repo: QuizRepoInterface,
                 sequence_repo: SequenceRepoInterface,
                 ratings: RatingUseCases,
                 scheduler: DeletionScheduler,
                 identifiers: IdentifierDeriver,
                 ledger: LedgerServiceInterface,
                 event_sink: EventSinkInterface,
                 origin_resolver: OriginResolverInterface,
                 clock: ClockInterface,
                 tokens_per_question: int,
                 validate_all_answers: bool = False):
        self.quiz_repo = quiz_repo
        self.sequence_repo = sequence_repo
        self.ratings = ratings
        self.scheduler = scheduler
        self.identifiers = identifiers
        self.ledger = ledger
        self.event_sink = event_sink
        self.origin_resolver = origin_resolver
        self.clock = clock
        self.tokens_per_question = tokens_per_question
        self.validate_all_answers = validate_all_answers
        self._lock = asyncio.Lock()

    async def create_quiz(self, ctx: CallContext, questions: list[Question],
                          solution: Solution, rating: int) -> int:
        """
        Creates a quiz owned by the caller and schedules its deletion.

        Only the first four answers of the solution are checked to be option numbers,
        unless `validate_all_answers` is enabled, in which case the fifth one is
        checked too.

        :param ctx: The context of the call, resolved into the owner account.
        :param questions: Exactly five questions, in the order the solution answers them.
        :param solution: The answer key.
        :param rating: The rating gate of the quiz, from 0 to 255.
        :return: The sequence number of the new quiz.
        :raises InvalidQuestionCount: if there are not exactly five questions.
        :raises InvalidSolution: if an answer is not between 1 and 4.
        """
        sender = await self.origin_resolver.resolve(ctx)
        if len(questions) != QUESTIONS_PER_QUIZ:
            raise InvalidQuestionCount(f"A quiz needs {QUESTIONS_PER_QUIZ} questions, got {len(questions)}")
        checked = solution.as_tuple() if self.validate_all_answers else solution.as_tuple()[:4]
        if any(not MIN_OPTION <= answer <= MAX_OPTION for answer in checked):
            raise InvalidSolution(f"Answers must be between {MIN_OPTION} and {MAX_OPTION}")
        quiz = Quiz(owner=sender, questions=list(questions), rating=rating)

        async with self._lock:
            sequence = await self.sequence_repo.get_latest() + 1
            quiz_id = self.identifiers.derive_quiz_id(sequence)
            try:
                await self.quiz_repo.create(quiz_id, quiz, solution)
            except AlreadyExists:
                logger.critical("QUIZ ID %s FOR SEQUENCE %s IS ALREADY TAKEN", quiz_id, sequence,
                                extra={'user': sender})
                raise
            try:
                due_tick = await self.scheduler.schedule(self.clock.current_tick(), quiz_id)
                # Counter goes last, a failed create leaves it where it was
                await self.sequence_repo.put(sequence)
            except Exception:
                await self.quiz_repo.delete(quiz_id)
                raise
            logger.info("CREATED QUIZ %s, DELETION AT TICK %s", sequence, due_tick, extra={'user': sender})
            await self._emit(QuizCreated(sequence=sequence, account=sender, rating=rating))
        return sequence

    async def attempt_quiz(self, ctx: CallContext, sequence: int, submission: Solution) -> int:
        """
        Scores a submission and charges the caller for every wrong answer.

        The caller pays (5 - score) * tokens_per_question to the quiz owner. The
        payment happens before the rating of the caller is updated and a failed
        payment aborts the attempt without touching the rating.

        :param ctx: The context of the call, resolved into the attempting account.
        :param sequence: The sequence number of the quiz.
        :param submission: The answers of the caller.
        :return: The score, from 0 to 5.
        :raises QuizNotFound: if the quiz doesn't exist.
        :raises OwnerCannotAttempt: if the caller owns the quiz.
        :raises RatingTooLow: if the caller's rating is below the gate minus one.
        :raises InsufficientBalance: if the caller can't pay.
        """
        sender = await self.origin_resolver.resolve(ctx)
        async with self._lock:
            quiz_id = self.identifiers.derive_quiz_id(sequence)
            quiz = await self.quiz_repo.get(quiz_id)
            if quiz is None:
                raise QuizNotFound(f"Quiz {sequence} does not exist")
            if sender == quiz.owner:
                raise OwnerCannotAttempt(f"Quiz {sequence} belongs to {sender}")

            user_rating = await self.ratings.get(sender)
            # Saturating, a gate of 0 lets everyone in
            required = max(quiz.rating - 1, 0)
            if user_rating < required:
                raise RatingTooLow(f"Rating {user_rating} is below {required} required by quiz {sequence}")

            solution = await self.quiz_repo.get_solution(quiz_id)
            if solution is None:
                raise QuizNotFound(f"Quiz {sequence} has no solution")

            score = find_score(submission, solution)
            await self._pay_owner(sender, quiz.owner, (MAX_SCORE - score) * self.tokens_per_question)
            await self.ratings.update(sender, score, user_rating)

            logger.info("ATTEMPTED QUIZ %s WITH SCORE %s", sequence, score, extra={'user': sender})
            await self._emit(QuizScored(sequence=sequence, account=sender, score=score))
        return score

    async def delete_quiz(self, ctx: CallContext, sequence: int) -> None:
        """
        Deletes a quiz together with its solution. Only the owner can do it.

        :raises QuizNotFound: if the quiz doesn't exist.
        :raises NotOwner: if the caller is not the owner.
        """
        sender = await self.origin_resolver.resolve(ctx)
        async with self._lock:
            quiz_id = self.identifiers.derive_quiz_id(sequence)
            quiz = await self.quiz_repo.get(quiz_id)
            if quiz is None:
                raise QuizNotFound(f"Quiz {sequence} does not exist")
            if sender != quiz.owner:
                raise NotOwner(f"Quiz {sequence} is not owned by {sender}")
            await self.quiz_repo.delete(quiz_id)
            logger.info("DELETED QUIZ %s", sequence, extra={'user': sender})

    async def on_tick(self, tick: int) -> list[str]:
        """
        Deletes the quizzes scheduled for this tick. Called by the host once per tick.

        Quizzes that their owner already deleted are skipped silently, an event is
        emitted for every scheduled entry anyway.

        :param tick: The tick that just started.
        :return: The quiz ids that were due.
        """
        async with self._lock:
            quiz_ids = await self.scheduler.fire(tick)
            for quiz_id in quiz_ids:
                await self.quiz_repo.delete(quiz_id)
                await self._emit(QuizDeleted(tick=tick))
        return quiz_ids

    async def get_quiz(self, sequence: int) -> Optional[Quiz]:
        """
        Returns the quiz without its solution, None if it doesn't exist.
        """
        return await self.quiz_repo.get(self.identifiers.derive_quiz_id(sequence))

    async def get_user_rating(self, account: str) -> int:
        return await self.ratings.get(account)

    async def latest_sequence(self) -> int:
        return await self.sequence_repo.get_latest()

    async def pending_deletions(self, tick: int) -> list[str]:
        return await self.scheduler.pending(tick)

    async def _pay_owner(self, sender: str, owner: str, amount: int) -> None:
        if amount == 0:
            return
        free_balance = await self.ledger.free_balance(sender)
        if free_balance < amount:
            raise InsufficientBalance(f"{sender} has {free_balance}, {amount} needed")
        try:
            await self.ledger.transfer(sender, owner, amount, keep_alive=True)
        except InsufficientFunds as e:
            raise InsufficientBalance(str(e)) from e

    async def _emit(self, event: Event) -> None:
        try:
            await self.event_sink.emit(event)
        except Exception as e:
            logger.error(f"Error while emitting {event.kind}: {e}", exc_info=True)
