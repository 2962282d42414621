from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from kidcode.core.database import get_db
from kidcode.core.dependencies import LessonId, get_current_user, get_lesson_or_404
from kidcode.models.user_model import User
from kidcode.models.lesson_model import Lesson
from kidcode.schemas import lesson_schema as schemas, progress_schema as progress_schemas
from kidcode.crud import lesson_crud as crud
from kidcode.services import submission_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/lessons", tags=["Lessons"])


@router.get("", response_model=List[schemas.LessonSummary])
def read_lessons_list(
    language: Optional[str] = Query(None, description="Exact language tag, e.g. Python"),
    topic: Optional[str] = Query(None, description="Exact topic tag, e.g. Loops"),
    db: Session = Depends(get_db)
):
    """
    List lessons, optionally filtered by language and/or topic. Publicly accessible.
    """
    return crud.get_lessons(db, language=language, topic=topic)


@router.get("/{lesson_id}", response_model=schemas.LessonDetail)
def read_single_lesson(
    lesson: Lesson = Depends(get_lesson_or_404)
):
    """
    Get a lesson with its quizzes. Correct answers are not included.
    """
    return lesson


@router.post("/{lesson_id}/start", response_model=progress_schemas.StartResponse)
def start_lesson(
    lesson_id: LessonId,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Record that the user has read the lesson's learning content.
    """
    logger.info(f"User {current_user.email} starting lesson {lesson_id}")
    submission_service.start_lesson(db, current_user.id, lesson_id)
    return progress_schemas.StartResponse(ok=True)


@router.post("/{lesson_id}/submit", response_model=progress_schemas.SubmissionResult)
def submit_lesson_answers(
    lesson_id: LessonId,
    submission: progress_schemas.LessonSubmission,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Submit quiz answers for a lesson. Scores them, stores the result as the
    user's progress and unlocks any achievements earned.
    """
    logger.info(f"User {current_user.email} submitting {len(submission.answers)} answers for lesson {lesson_id}")
    return submission_service.submit_lesson(db, current_user.id, lesson_id, submission.answers)
