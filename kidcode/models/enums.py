import enum

DEFAULT_LANGUAGE = "KidCode"
DEFAULT_TOPIC = "Basics"

class AchievementCode(str, enum.Enum):
    """Codes of the achievements awarded by the submission workflow."""
    FIRST_LESSON_COMPLETE = "FIRST_LESSON_COMPLETE"
    PERFECT_SCORE = "PERFECT_SCORE"
    THREE_LESSONS = "THREE_LESSONS"

# Completed lessons needed for THREE_LESSONS
THREE_LESSONS_THRESHOLD = 3
