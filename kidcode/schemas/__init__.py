# This file makes the 'schemas' directory a Python package.

from .user_schema import (
    TokenData, UserRegisterRequest, UserLoginRequest, TokenResponse, UserDisplay
)

from .lesson_schema import (
    QuizBase, QuizCreate, QuizPublic,
    LessonBase, LessonCreate, LessonSummary, LessonDetail,
    LanguageCount, TopicCount
)

from .progress_schema import (
    ProgressDisplay, StartResponse, LessonSubmission, SubmissionResult
)

from .achievement_schema import (
    AchievementBase, AchievementCreate, AchievementUnlockRequest, UnlockedAchievementDisplay
)


__all__ = [
    # User Schemas
    "TokenData", "UserRegisterRequest", "UserLoginRequest", "TokenResponse", "UserDisplay",

    # Lesson & Catalog Schemas
    "QuizBase", "QuizCreate", "QuizPublic",
    "LessonBase", "LessonCreate", "LessonSummary", "LessonDetail",
    "LanguageCount", "TopicCount",

    # Progress & Submission Schemas
    "ProgressDisplay", "StartResponse", "LessonSubmission", "SubmissionResult",

    # Achievement Schemas
    "AchievementBase", "AchievementCreate", "AchievementUnlockRequest", "UnlockedAchievementDisplay",
]
