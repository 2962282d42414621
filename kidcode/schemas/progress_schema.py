from pydantic import BaseModel, Field, StrictInt
from typing import List, Optional
from datetime import datetime

class ProgressDisplay(BaseModel):
    lesson_id: int
    started: bool
    completed: bool
    score: int
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StartResponse(BaseModel):
    ok: bool = True


# --- Submission Schemas ---
class LessonSubmission(BaseModel):
    # Positional: answers[i] is matched against the i-th quiz of the lesson.
    # Short lists leave trailing quizzes unanswered, extra entries are ignored,
    # null means "no answer" and never matches.
    answers: List[Optional[StrictInt]] = Field(..., description="Selected option index per quiz, in quiz order")


class SubmissionResult(BaseModel):
    score: int = Field(..., ge=0, description="Number of correctly answered quizzes")
    total: int = Field(..., ge=0, description="Number of quizzes in the lesson")
    completed: bool
    newly_unlocked: List[str] = Field(default_factory=list, description="Achievement codes first unlocked by this submission")
