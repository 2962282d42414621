# This file makes the 'crud' directory a Python package.

from .user_crud import (
    get_user_by_id,
    get_user_by_email,
    create_user,
)

from .lesson_crud import (
    create_lesson, get_lesson_with_quizzes, lesson_exists, count_lessons, get_lessons,
    get_quiz_answer_key, count_lessons_by_language, count_lessons_by_topic, search_lessons
)

from .progress_crud import (
    upsert_submission_progress,
    mark_lesson_started,
    count_completed_lessons,
    get_progress_for_lesson,
    get_progress_for_user
)

from .achievement_crud import (
    get_achievement_by_code, get_achievements, ensure_achievement, grant_achievement,
    get_unlock, get_unlocked_achievements_for_user
)


__all__ = [
    # User CRUD
    "get_user_by_id", "get_user_by_email", "create_user",

    # Lesson CRUD
    "create_lesson", "get_lesson_with_quizzes", "lesson_exists", "count_lessons", "get_lessons",
    "get_quiz_answer_key", "count_lessons_by_language", "count_lessons_by_topic", "search_lessons",

    # Progress CRUD
    "upsert_submission_progress", "mark_lesson_started", "count_completed_lessons",
    "get_progress_for_lesson", "get_progress_for_user",

    # Achievement CRUD
    "get_achievement_by_code", "get_achievements", "ensure_achievement", "grant_achievement",
    "get_unlock", "get_unlocked_achievements_for_user",
]
