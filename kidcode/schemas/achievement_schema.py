from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class AchievementBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)

class AchievementCreate(AchievementBase):
    pass

class AchievementUnlockRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=100)
    # Only used when the code is new to the catalog
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)

class UnlockedAchievementDisplay(AchievementBase):
    unlocked_at: datetime
