from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from kidcode.core.database import get_db
from kidcode.schemas import lesson_schema as schemas
from kidcode.crud import lesson_crud as crud

router = APIRouter(tags=["Catalog"])


@router.get("/catalog/languages", response_model=List[schemas.LanguageCount])
def read_language_counts(db: Session = Depends(get_db)):
    """Number of lessons per language."""
    return crud.count_lessons_by_language(db)


@router.get("/catalog/topics", response_model=List[schemas.TopicCount])
def read_topic_counts(
    language: Optional[str] = Query(None, description="Only count lessons in this language"),
    db: Session = Depends(get_db)
):
    """Number of lessons per topic."""
    return crud.count_lessons_by_topic(db, language=language)


@router.get("/search", response_model=List[schemas.LessonSummary])
def search_lessons(
    q: str = Query("", description="Text to look for in lesson titles, summaries and content"),
    db: Session = Depends(get_db)
):
    """
    Case-insensitive lesson search. Returns at most 50 lessons, unranked.
    """
    return crud.search_lessons(db, q)
