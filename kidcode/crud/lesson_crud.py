from sqlalchemy.orm import Session, selectinload
from sqlalchemy import func, or_
from typing import List, Optional
import logging

from kidcode.models.lesson_model import Lesson, Quiz
from kidcode.schemas import lesson_schema as schemas

logger = logging.getLogger(__name__)

SEARCH_RESULT_LIMIT = 50

# --- Lesson CRUD ---
def create_lesson(db: Session, lesson_in: schemas.LessonCreate) -> Lesson:
    """
    Adds a lesson and its quizzes to the session (quiz order = list order).
    The caller owns the transaction; used by seeding and tests.
    """
    logger.debug(f"Creating lesson titled '{lesson_in.title}' with {len(lesson_in.quizzes)} quizzes")
    db_lesson = Lesson(**lesson_in.model_dump(exclude={"quizzes"}))
    for quiz_in in lesson_in.quizzes:
        db_lesson.quizzes.append(Quiz(**quiz_in.model_dump()))
    db.add(db_lesson)
    db.flush()
    return db_lesson

def get_lesson_with_quizzes(db: Session, lesson_id: int) -> Optional[Lesson]:
    logger.debug(f"Fetching lesson with quizzes, ID: {lesson_id}")
    return db.query(Lesson).options(selectinload(Lesson.quizzes)).filter(Lesson.id == lesson_id).first()

def lesson_exists(db: Session, lesson_id: int) -> bool:
    return db.query(Lesson.id).filter(Lesson.id == lesson_id).first() is not None

def count_lessons(db: Session) -> int:
    return db.query(func.count(Lesson.id)).scalar() or 0

def get_lessons(
    db: Session,
    language: Optional[str] = None,
    topic: Optional[str] = None
) -> List[Lesson]:
    """Lists lessons; `language` and `topic` are exact-match filters, ANDed when both are given."""
    logger.debug(f"Fetching lessons with language: {language}, topic: {topic}")
    query = db.query(Lesson)
    if language:
        query = query.filter(Lesson.language == language)
    if topic:
        query = query.filter(Lesson.topic == topic)
    return query.order_by(Lesson.id.asc()).all()

def get_quiz_answer_key(db: Session, lesson_id: int) -> List[int]:
    """Correct option index of every quiz in the lesson, in stored order."""
    rows = db.query(Quiz.answer_index).filter(Quiz.lesson_id == lesson_id).order_by(Quiz.id.asc()).all()
    return [row.answer_index for row in rows]

# --- Catalog aggregates ---
def count_lessons_by_language(db: Session) -> List[schemas.LanguageCount]:
    logger.debug("Counting lessons by language")
    rows = (
        db.query(Lesson.language, func.count(Lesson.id).label("count"))
        .group_by(Lesson.language)
        .order_by(Lesson.language.asc())
        .all()
    )
    return [schemas.LanguageCount(language=row.language, count=row.count) for row in rows]

def count_lessons_by_topic(db: Session, language: Optional[str] = None) -> List[schemas.TopicCount]:
    logger.debug(f"Counting lessons by topic (language: {language})")
    query = db.query(Lesson.topic, func.count(Lesson.id).label("count"))
    if language:
        query = query.filter(Lesson.language == language)
    rows = query.group_by(Lesson.topic).order_by(Lesson.topic.asc()).all()
    return [schemas.TopicCount(topic=row.topic, count=row.count) for row in rows]

def search_lessons(db: Session, q: str, limit: int = SEARCH_RESULT_LIMIT) -> List[Lesson]:
    """
    Case-insensitive substring search over title, summary and content.
    LIKE wildcards in `q` match literally. No ranking.
    """
    term = (q or "").strip()
    if not term:
        return []
    logger.debug(f"Searching lessons for: '{term}'")
    return (
        db.query(Lesson)
        .filter(or_(
            Lesson.title.icontains(term, autoescape=True),
            Lesson.summary.icontains(term, autoescape=True),
            Lesson.content.icontains(term, autoescape=True),
        ))
        .limit(limit)
        .all()
    )
