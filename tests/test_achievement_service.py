"""Client-requested unlocks."""
import pytest

from kidcode.core.exceptions import NotFound, ValidationError
from kidcode.crud import achievement_crud
from kidcode.schemas.achievement_schema import AchievementUnlockRequest
from kidcode.services import achievement_service


@pytest.mark.usefixtures("catalog")
class TestUnlockForUser:
    def test_known_code_keeps_catalog_text(self, db, user):
        request = AchievementUnlockRequest(code="PERFECT_SCORE", title="Other", description="Other text")

        unlocked = achievement_service.unlock_for_user(db, user.id, request, allow_new_codes=True)

        assert (unlocked.code, unlocked.title) == ("PERFECT_SCORE", "Perfect!")
        assert achievement_crud.get_achievement_by_code(db, "PERFECT_SCORE").description == "Score 100% on any lesson quiz."

    def test_repeat_unlock_returns_original_time(self, db, user):
        request = AchievementUnlockRequest(code="FIRST_LESSON_COMPLETE")

        first = achievement_service.unlock_for_user(db, user.id, request)
        second = achievement_service.unlock_for_user(db, user.id, request)

        assert second.unlocked_at == first.unlocked_at
        assert len(achievement_crud.get_unlocked_achievements_for_user(db, user.id)) == 1

    def test_new_code_is_added_when_allowed(self, db, user):
        request = AchievementUnlockRequest(code="NIGHT_OWL", title="Night Owl", description="Study after dark.")

        unlocked = achievement_service.unlock_for_user(db, user.id, request, allow_new_codes=True)

        assert unlocked.title == "Night Owl"
        assert achievement_crud.get_achievement_by_code(db, "NIGHT_OWL") is not None

    def test_new_code_needs_title_and_description(self, db, user):
        with pytest.raises(ValidationError):
            achievement_service.unlock_for_user(
                db, user.id, AchievementUnlockRequest(code="NIGHT_OWL", title="Night Owl"), allow_new_codes=True
            )
        assert achievement_crud.get_achievement_by_code(db, "NIGHT_OWL") is None

    def test_new_code_is_rejected_when_closed(self, db, user):
        request = AchievementUnlockRequest(code="NIGHT_OWL", title="Night Owl", description="Study after dark.")

        with pytest.raises(NotFound):
            achievement_service.unlock_for_user(db, user.id, request, allow_new_codes=False)

        assert achievement_crud.get_achievement_by_code(db, "NIGHT_OWL") is None
        assert achievement_crud.get_unlocked_achievements_for_user(db, user.id) == []

    def test_known_code_is_accepted_when_closed(self, db, user):
        unlocked = achievement_service.unlock_for_user(
            db, user.id, AchievementUnlockRequest(code="THREE_LESSONS"), allow_new_codes=False
        )
        assert unlocked.code == "THREE_LESSONS"
