from fastapi import Depends, Path, Request
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.orm import Session
from typing import Annotated
import logging

from kidcode.core.database import MAX_ROW_ID, get_db
from kidcode.core.exceptions import NotFound, Unauthorized
from kidcode.core.security import decode_access_token
from kidcode.crud.user_crud import get_user_by_id
from kidcode.crud.lesson_crud import get_lesson_with_quizzes
from kidcode.models.user_model import User
from kidcode.models.lesson_model import Lesson
from kidcode.schemas.user_schema import TokenData

logger = logging.getLogger(__name__)

# Lesson id path parameter; ids the database cannot hold are rejected with 400
LessonId = Annotated[int, Path(ge=1, le=MAX_ROW_ID, description="Lesson ID")]

# Dependency to get the current user from a bearer token
def get_current_user(
    request: Request, db: Session = Depends(get_db)
) -> User:
    """
    Dependency to get the current authenticated user.
    Verifies the bearer token from the Authorization header,
    then checks that the user it names still exists.
    """
    authorization: str = request.headers.get("Authorization")
    scheme, param = get_authorization_scheme_param(authorization)

    if not authorization or scheme.lower() != "bearer" or not param:
        logger.warning("Missing or invalid Bearer token in Authorization header.")
        raise Unauthorized("Missing token")

    token_data: TokenData = decode_access_token(param)

    user = get_user_by_id(db, token_data.user_id)
    if user is None:
        # Token outlived its user, e.g. the database was reset
        logger.warning(f"User not found in DB for token subject: {token_data.user_id}")
        raise Unauthorized("Session expired. Please log in again.")

    logger.debug(f"Authenticated user retrieved: {user.email} (ID: {user.id})")
    return user


# Get Lesson (with quizzes) or Raise 404
def get_lesson_or_404(lesson_id: LessonId, db: Session = Depends(get_db)) -> Lesson:
    lesson = get_lesson_with_quizzes(db, lesson_id)
    if not lesson:
        logger.warning(f"Lesson with ID {lesson_id} not found.")
        raise NotFound("Lesson not found")
    return lesson
