"""
Lesson submission workflow.

Scores a submission against the lesson's quizzes, overwrites the user's
progress row for the lesson and evaluates the achievement rules, all in one
transaction on the session passed in by the caller.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kidcode.core.exceptions import NotFound, StorageFailure
from kidcode.crud import achievement_crud, lesson_crud, progress_crud
from kidcode.models.enums import AchievementCode, THREE_LESSONS_THRESHOLD
from kidcode.schemas.progress_schema import SubmissionResult

logger = logging.getLogger(__name__)


def score_answers(answer_key: Sequence[int], answers: Sequence[Optional[int]]) -> int:
    """
    Counts positions where the submitted index equals the correct one.
    Positions past the end of `answers` count as wrong; extra answers are ignored.
    """
    score = 0
    for position, correct_index in enumerate(answer_key):
        if position < len(answers) and answers[position] == correct_index:
            score += 1
    return score


def is_completed(score: int, total: int) -> bool:
    # A lesson without quizzes is complete on any submission
    if total == 0:
        return True
    return score == total


def earned_achievements(completed: bool, score: int, total: int, completed_lessons: int) -> List[AchievementCode]:
    """Achievement rules. Each is independent of the others."""
    earned = []
    if completed:
        earned.append(AchievementCode.FIRST_LESSON_COMPLETE)
    if total > 0 and score == total:
        earned.append(AchievementCode.PERFECT_SCORE)
    if completed_lessons >= THREE_LESSONS_THRESHOLD:
        earned.append(AchievementCode.THREE_LESSONS)
    return earned


def _unlock_earned(db: Session, user_id: int, earned: List[AchievementCode], now: datetime) -> List[str]:
    newly_unlocked = []
    for code in earned:
        achievement = achievement_crud.get_achievement_by_code(db, code.value)
        if achievement is None:
            logger.warning(f"Achievement '{code.value}' is missing from the catalog; rule skipped.")
            continue
        if achievement_crud.grant_achievement(db, user_id, achievement.id, now=now):
            newly_unlocked.append(code.value)
    return newly_unlocked


def submit_lesson(db: Session, user_id: int, lesson_id: int, answers: Sequence[Optional[int]]) -> SubmissionResult:
    """
    Scores `answers` for the lesson and records the outcome.

    Raises:
        NotFound: if the lesson does not exist. Nothing is written.
        StorageFailure: if any write fails. The progress upsert and all
            unlocks are rolled back together.
    """
    logger.info(f"Processing submission for lesson_id {lesson_id} by user_id {user_id}")

    if not lesson_crud.lesson_exists(db, lesson_id):
        logger.warning(f"Submission rejected: lesson {lesson_id} not found.")
        raise NotFound("Lesson not found")

    answer_key = lesson_crud.get_quiz_answer_key(db, lesson_id)
    total = len(answer_key)
    score = score_answers(answer_key, answers)
    completed = is_completed(score, total)
    now = datetime.now(timezone.utc)

    try:
        progress_crud.upsert_submission_progress(db, user_id, lesson_id, completed=completed, score=score, now=now)
        # Counted after the upsert so this submission is included
        completed_lessons = progress_crud.count_completed_lessons(db, user_id)
        earned = earned_achievements(completed, score, total, completed_lessons)
        newly_unlocked = _unlock_earned(db, user_id, earned, now)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving submission for lesson {lesson_id} by user {user_id}: {e}", exc_info=True)
        raise StorageFailure("Could not save progress. Please try again.") from e
    except Exception:
        db.rollback()
        raise

    logger.info(
        f"Lesson {lesson_id} submitted by user {user_id}. Score: {score}/{total}, completed: {completed}, "
        f"newly unlocked: {newly_unlocked or 'none'}"
    )
    return SubmissionResult(score=score, total=total, completed=completed, newly_unlocked=newly_unlocked)


def start_lesson(db: Session, user_id: int, lesson_id: int) -> None:
    """
    Marks the lesson's learning content as acknowledged by the user.

    Raises:
        NotFound: if the lesson does not exist.
    """
    if not lesson_crud.lesson_exists(db, lesson_id):
        logger.warning(f"Start rejected: lesson {lesson_id} not found.")
        raise NotFound("Lesson not found")
    progress_crud.mark_lesson_started(db, user_id, lesson_id)
