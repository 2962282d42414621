from sqlalchemy.orm import Session
from typing import List, Optional
import logging
from datetime import datetime, timezone

from kidcode.core.database import dialect_insert
from kidcode.models.achievement_model import Achievement, UserAchievement
from kidcode.schemas import achievement_schema as schemas

logger = logging.getLogger(__name__)


def get_achievement_by_code(db: Session, code: str) -> Optional[Achievement]:
    logger.debug(f"Fetching achievement by code: {code}")
    return db.query(Achievement).filter(Achievement.code == code).first()

def get_achievements(db: Session) -> List[Achievement]:
    return db.query(Achievement).order_by(Achievement.id.asc()).all()

def ensure_achievement(db: Session, achievement_in: schemas.AchievementCreate) -> Achievement:
    """
    Inserts a catalog entry if its code is new and returns the stored entry.
    An existing entry is returned unchanged. Does not commit.
    """
    stmt = dialect_insert(db, Achievement).values(**achievement_in.model_dump())
    stmt = stmt.on_conflict_do_nothing(index_elements=[Achievement.code])
    result = db.execute(stmt)
    if result.rowcount:
        logger.info(f"Achievement '{achievement_in.code}' added to the catalog.")
    return get_achievement_by_code(db, achievement_in.code)

def grant_achievement(
    db: Session,
    user_id: int,
    achievement_id: int,
    now: Optional[datetime] = None
) -> bool:
    """
    Records that the user unlocked the achievement, unless already recorded.
    The first unlock time is never overwritten. Does not commit.

    Returns:
        True if this call created the unlock record.
    """
    stmt = dialect_insert(db, UserAchievement).values(
        user_id=user_id,
        achievement_id=achievement_id,
        unlocked_at=now or datetime.now(timezone.utc),
    )
    stmt = stmt.on_conflict_do_nothing(index_elements=[UserAchievement.user_id, UserAchievement.achievement_id])
    result = db.execute(stmt)
    return bool(result.rowcount)

def get_unlock(db: Session, user_id: int, achievement_id: int) -> Optional[UserAchievement]:
    return db.query(UserAchievement).filter(
        UserAchievement.user_id == user_id,
        UserAchievement.achievement_id == achievement_id
    ).first()

def get_unlocked_achievements_for_user(db: Session, user_id: int) -> List[schemas.UnlockedAchievementDisplay]:
    """The user's unlocked achievements, newest first."""
    logger.debug(f"Fetching unlocked achievements for user_id {user_id}")
    rows = (
        db.query(Achievement.code, Achievement.title, Achievement.description, UserAchievement.unlocked_at)
        .join(UserAchievement, UserAchievement.achievement_id == Achievement.id)
        .filter(UserAchievement.user_id == user_id)
        .order_by(UserAchievement.unlocked_at.desc(), Achievement.id.desc())
        .all()
    )
    return [
        schemas.UnlockedAchievementDisplay(
            code=row.code,
            title=row.title,
            description=row.description,
            unlocked_at=row.unlocked_at,
        )
        for row in rows
    ]
