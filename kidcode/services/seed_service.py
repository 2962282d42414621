"""
Reference data: the achievement catalog, the demo lessons and the demo user.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kidcode.core.security import hash_password
from kidcode.crud import achievement_crud, lesson_crud, user_crud
from kidcode.models.enums import AchievementCode
from kidcode.models.user_model import User
from kidcode.schemas.achievement_schema import AchievementCreate
from kidcode.schemas.lesson_schema import LessonCreate, QuizCreate

logger = logging.getLogger(__name__)

ACHIEVEMENT_CATALOG = [
    AchievementCreate(code=AchievementCode.FIRST_LESSON_COMPLETE.value, title="First Steps", description="Complete your first lesson."),
    AchievementCreate(code=AchievementCode.PERFECT_SCORE.value, title="Perfect!", description="Score 100% on any lesson quiz."),
    AchievementCreate(code=AchievementCode.THREE_LESSONS.value, title="Getting the Hang", description="Complete three lessons."),
]

DEMO_USER_EMAIL = "demo@example.com"
DEMO_USER_PASSWORD = "demo1234"
DEMO_USER_DISPLAY_NAME = "Demo Kid"

DEMO_LESSONS = [
    LessonCreate(
        title="Sequencing Basics", language="KidCode", topic="Basics",
        summary="Understand step-by-step instructions and order of operations.",
        content="Programming executes instructions in sequence. Arrange steps to complete tasks like making a sandwich. "
                "In code, this means lines run from top to bottom unless we change the flow.",
        quizzes=[QuizCreate(
            question="Which comes first when making tea?",
            options=["Boil water", "Add tea leaves to dry cup", "Drink tea"],
            answer_index=0,
        )],
    ),
    LessonCreate(
        title="Loops 101", language="KidCode", topic="Loops",
        summary="Repeat actions using loops.",
        content="Loops let us repeat actions many times. For example, repeat 5 times to draw 5 stars.",
        quizzes=[QuizCreate(
            question="A loop is best for...?",
            options=["Doing something once", "Repeating an action many times", "Stopping the program"],
            answer_index=1,
        )],
    ),
    LessonCreate(
        title="Conditions", language="KidCode", topic="Conditions",
        summary="Make decisions with if/else.",
        content="Conditions let the program choose different paths. If it rains, take an umbrella; else, wear sunglasses.",
    ),
    LessonCreate(
        title="HTML Introduction", language="HTML", topic="Basics",
        summary="What is HTML and how a web page is structured.",
        content="<!DOCTYPE html> defines an HTML5 document. Use <html>, <head>, and <body>. "
                "Headings use <h1>..</h1>. Paragraphs use <p>..</p>.",
        quizzes=[QuizCreate(
            question="Which tag defines the main content displayed on the page?",
            options=["<head>", "<body>", "<title>"],
            answer_index=1,
        )],
    ),
    LessonCreate(
        title="HTML Links and Images", language="HTML", topic="Elements",
        summary="Using <a> for links and <img> for images.",
        content='Links: <a href="https://example.com">Visit</a>. Images: <img src="cat.jpg" alt="A cat" />. Always include alt text.',
    ),
    LessonCreate(
        title="CSS Selectors", language="CSS", topic="Selectors",
        summary="Select elements by tag, class, and id.",
        content='p { color: blue } selects all paragraphs. .btn selects class="btn". #main selects id="main".',
        quizzes=[QuizCreate(
            question='Which selector targets an element with id="main"?',
            options=[".main", "#main", "main"],
            answer_index=1,
        )],
    ),
    LessonCreate(
        title="CSS Box Model", language="CSS", topic="Layout",
        summary="Content, padding, border, margin.",
        content="Every element is a box. Total size = content + padding + border + margin. "
                "Use box-sizing: border-box for predictable sizing.",
    ),
    LessonCreate(
        title="JS Variables", language="JavaScript", topic="Basics",
        summary="let and const, and basic types.",
        content='Use let for reassignable variables, const for constants. Example: const name = "Ava"; let age = 10;',
        quizzes=[QuizCreate(
            question="Which keyword defines a constant?",
            options=["var", "let", "const"],
            answer_index=2,
        )],
    ),
    LessonCreate(
        title="JS Conditions", language="JavaScript", topic="Control Flow",
        summary="if/else and comparison operators.",
        content='if (age >= 13) { console.log("Teen"); } else { console.log("Kid"); }',
    ),
    LessonCreate(
        title="Python Print", language="Python", topic="Basics",
        summary="Your first output.",
        content='print("Hello, world!") prints text to the screen. Strings use quotes.',
        quizzes=[QuizCreate(
            question='What does print("Hi") do?',
            options=["Saves a file", "Outputs text", "Creates a variable"],
            answer_index=1,
        )],
    ),
    LessonCreate(
        title="Python Loops", language="Python", topic="Loops",
        summary="for and while loops.",
        content="for i in range(5): print(i) prints 0..4. while loops repeat while a condition is true.",
    ),
]


def seed_achievement_catalog(db: Session) -> None:
    """Inserts any missing catalog achievement. Safe to call on every startup."""
    try:
        for achievement_in in ACHIEVEMENT_CATALOG:
            achievement_crud.ensure_achievement(db, achievement_in)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error seeding the achievement catalog: {e}", exc_info=True)
        raise


def seed_if_empty(db: Session) -> bool:
    """
    Seeds the demo lessons, their quizzes and the demo user when no lesson
    exists yet, in a single transaction. The achievement catalog is always
    ensured.

    Returns:
        True if the demo content was inserted by this call.
    """
    seed_achievement_catalog(db)

    if lesson_crud.count_lessons(db) > 0:
        logger.debug("Lessons already present; skipping demo content.")
        return False

    logger.info(f"Seeding {len(DEMO_LESSONS)} demo lessons and the demo user...")
    try:
        for lesson_in in DEMO_LESSONS:
            lesson_crud.create_lesson(db, lesson_in)
        if not user_crud.get_user_by_email(db, DEMO_USER_EMAIL):
            db.add(User(
                email=DEMO_USER_EMAIL,
                password_hash=hash_password(DEMO_USER_PASSWORD),
                display_name=DEMO_USER_DISPLAY_NAME,
            ))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error seeding demo content: {e}", exc_info=True)
        raise

    logger.info("Demo content seeded.")
    return True
