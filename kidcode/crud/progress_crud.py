from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
import logging
from datetime import datetime, timezone

from kidcode.core.database import dialect_insert
from kidcode.core.exceptions import StorageFailure
from kidcode.models.progress_model import Progress

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def upsert_submission_progress(
    db: Session,
    user_id: int,
    lesson_id: int,
    completed: bool,
    score: int,
    now: Optional[datetime] = None
) -> None:
    """
    Writes the outcome of a submission for (user, lesson).

    Insert-or-update on the (user_id, lesson_id) unique key: an existing row
    has `completed`, `score` and `updated_at` overwritten (last write wins,
    never the best score); `started` is left alone. Does not commit; the
    caller owns the transaction.
    """
    now = now or _utcnow()
    logger.debug(f"Upserting progress for user_id {user_id}, lesson_id {lesson_id}: score={score}, completed={completed}")
    stmt = dialect_insert(db, Progress).values(
        user_id=user_id,
        lesson_id=lesson_id,
        started=False,
        completed=completed,
        score=score,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Progress.user_id, Progress.lesson_id],
        set_={
            "completed": stmt.excluded.completed,
            "score": stmt.excluded.score,
            "updated_at": stmt.excluded.updated_at,
        },
    )
    db.execute(stmt)

def mark_lesson_started(db: Session, user_id: int, lesson_id: int) -> None:
    """
    Sets `started` for (user, lesson), creating the row with completed=False
    and score=0 when absent. An existing score/completion is kept.
    """
    now = _utcnow()
    stmt = dialect_insert(db, Progress).values(
        user_id=user_id,
        lesson_id=lesson_id,
        started=True,
        completed=False,
        score=0,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Progress.user_id, Progress.lesson_id],
        set_={"started": True, "updated_at": stmt.excluded.updated_at},
    )

    try:
        db.execute(stmt)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error marking lesson {lesson_id} started for user {user_id}: {e}", exc_info=True)
        raise StorageFailure("Could not mark lesson as started. Please try again.") from e

    logger.info(f"User {user_id} started lesson {lesson_id}.")

def count_completed_lessons(db: Session, user_id: int) -> int:
    """Number of lessons whose latest submission by the user was complete."""
    return db.query(func.count(Progress.id)).filter(
        Progress.user_id == user_id,
        Progress.completed.is_(True)
    ).scalar() or 0

def get_progress_for_lesson(db: Session, user_id: int, lesson_id: int) -> Optional[Progress]:
    logger.debug(f"Fetching progress for user_id {user_id}, lesson_id {lesson_id}")
    return db.query(Progress).filter(
        Progress.user_id == user_id,
        Progress.lesson_id == lesson_id
    ).first()

def get_progress_for_user(db: Session, user_id: int) -> List[Progress]:
    """All progress rows of a user, most recently updated first."""
    logger.debug(f"Fetching all progress for user_id {user_id}")
    return db.query(Progress).filter(
        Progress.user_id == user_id
    ).order_by(Progress.updated_at.desc(), Progress.lesson_id.asc()).all()
