# This file makes the 'models' directory a Python package.

from kidcode.core.database import Base # Base must be imported before models that use it

from .enums import AchievementCode

from .user_model import User
from .lesson_model import Lesson, Quiz
from .progress_model import Progress
from .achievement_model import Achievement, UserAchievement


__all__ = [
    "Base",
    # Models
    "User",
    "Lesson",
    "Quiz",
    "Progress",
    "Achievement",
    "UserAchievement",
    # Enums
    "AchievementCode",
]
