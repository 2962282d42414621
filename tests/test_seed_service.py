"""Reference data seeding."""
from kidcode.core.security import verify_password
from kidcode.crud import achievement_crud, lesson_crud, user_crud
from kidcode.models.lesson_model import Quiz
from kidcode.services import seed_service


class TestSeedIfEmpty:
    def test_seeds_lessons_quizzes_user_and_catalog(self, db):
        assert seed_service.seed_if_empty(db) is True

        assert lesson_crud.count_lessons(db) == len(seed_service.DEMO_LESSONS)
        assert db.query(Quiz).count() == sum(len(lesson.quizzes) for lesson in seed_service.DEMO_LESSONS)
        assert [a.code for a in achievement_crud.get_achievements(db)] == [
            "FIRST_LESSON_COMPLETE", "PERFECT_SCORE", "THREE_LESSONS",
        ]
        demo = user_crud.get_user_by_email(db, seed_service.DEMO_USER_EMAIL)
        assert demo.display_name == "Demo Kid"
        assert verify_password(seed_service.DEMO_USER_PASSWORD, demo.password_hash)

    def test_is_idempotent(self, db):
        seed_service.seed_if_empty(db)

        assert seed_service.seed_if_empty(db) is False
        assert lesson_crud.count_lessons(db) == len(seed_service.DEMO_LESSONS)
        assert len(achievement_crud.get_achievements(db)) == len(seed_service.ACHIEVEMENT_CATALOG)

    def test_existing_lessons_still_get_the_catalog(self, db, make_lesson):
        make_lesson([0])

        assert seed_service.seed_if_empty(db) is False
        assert lesson_crud.count_lessons(db) == 1
        assert len(achievement_crud.get_achievements(db)) == 3

    def test_seeded_quizzes_keep_their_order(self, db):
        seed_service.seed_if_empty(db)
        html_intro = lesson_crud.get_lessons(db, language="HTML", topic="Basics")[0]

        assert lesson_crud.get_quiz_answer_key(db, html_intro.id) == [1]
