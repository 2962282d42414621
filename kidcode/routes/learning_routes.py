from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
import logging

from kidcode.core.database import get_db
from kidcode.core.dependencies import get_current_user # For authenticated user
from kidcode.models.user_model import User # For type hinting current_user
from kidcode.schemas import (
    progress_schema as progress_schemas,
    achievement_schema as achievement_schemas,
)
from kidcode.crud import (
    progress_crud,
    achievement_crud,
)
from kidcode.services import achievement_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Learning & Progress"])


@router.get("/me/progress", response_model=List[progress_schemas.ProgressDisplay])
def get_my_progress(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Progress of the current user in every lesson they have started or submitted.
    """
    logger.info(f"Fetching progress for user {current_user.email} (ID: {current_user.id})")
    return progress_crud.get_progress_for_user(db, current_user.id)


@router.get("/me/achievements", response_model=List[achievement_schemas.UnlockedAchievementDisplay])
def get_my_achievements(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Achievements unlocked by the current user, newest first.
    """
    logger.info(f"Fetching achievements for user {current_user.email} (ID: {current_user.id})")
    return achievement_crud.get_unlocked_achievements_for_user(db, current_user.id)


@router.post("/achievements/unlock", response_model=achievement_schemas.UnlockedAchievementDisplay)
def unlock_achievement(
    unlock_in: achievement_schemas.AchievementUnlockRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Unlock an achievement by code for the current user.
    Unknown codes are added to the catalog unless ALLOW_CLIENT_ACHIEVEMENT_CODES is off.
    """
    logger.info(f"User {current_user.email} unlocking achievement '{unlock_in.code}'")
    return achievement_service.unlock_for_user(db, current_user.id, unlock_in)
