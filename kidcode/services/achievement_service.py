import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kidcode.core.config import settings
from kidcode.core.exceptions import NotFound, StorageFailure, ValidationError
from kidcode.crud import achievement_crud
from kidcode.schemas.achievement_schema import (
    AchievementCreate, AchievementUnlockRequest, UnlockedAchievementDisplay
)

logger = logging.getLogger(__name__)


def unlock_for_user(
    db: Session,
    user_id: int,
    unlock_in: AchievementUnlockRequest,
    allow_new_codes: bool | None = None
) -> UnlockedAchievementDisplay:
    """
    Unlocks a client-named achievement for the user.

    A known code keeps its catalog title and description. An unknown code is
    added to the catalog from the request when `allow_new_codes` is on
    (defaults to settings.ALLOW_CLIENT_ACHIEVEMENT_CODES), otherwise rejected.
    Repeating the call returns the original unlock time.

    Raises:
        NotFound: unknown code while new codes are not allowed.
        ValidationError: unknown code without a title and description.
        StorageFailure: if a write fails.
    """
    if allow_new_codes is None:
        allow_new_codes = settings.ALLOW_CLIENT_ACHIEVEMENT_CODES

    achievement = achievement_crud.get_achievement_by_code(db, unlock_in.code)
    if achievement is None:
        if not allow_new_codes:
            logger.warning(f"User {user_id} tried to unlock unknown achievement '{unlock_in.code}'.")
            raise NotFound(f"Unknown achievement code: {unlock_in.code}")
        if not unlock_in.title or not unlock_in.description:
            raise ValidationError("title and description are required for a new achievement code")

    try:
        if achievement is None:
            achievement = achievement_crud.ensure_achievement(db, AchievementCreate(
                code=unlock_in.code,
                title=unlock_in.title,
                description=unlock_in.description,
            ))
        created = achievement_crud.grant_achievement(db, user_id, achievement.id, now=datetime.now(timezone.utc))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error unlocking achievement '{unlock_in.code}' for user {user_id}: {e}", exc_info=True)
        raise StorageFailure("Could not unlock achievement. Please try again.") from e

    unlock = achievement_crud.get_unlock(db, user_id, achievement.id)
    if created:
        logger.info(f"Achievement '{achievement.code}' unlocked for user {user_id}.")
    else:
        logger.debug(f"Achievement '{achievement.code}' was already unlocked for user {user_id}.")

    return UnlockedAchievementDisplay(
        code=achievement.code,
        title=achievement.title,
        description=achievement.description,
        unlocked_at=unlock.unlocked_at,
    )
