from pydantic import BaseModel, Field, model_validator
from typing import List

from kidcode.models.enums import DEFAULT_LANGUAGE, DEFAULT_TOPIC

# --- Quiz Schemas ---
class QuizBase(BaseModel):
    question: str = Field(..., min_length=1, description="The question text")
    options: List[str] = Field(..., min_length=1, description="Answer options in display order")

class QuizCreate(QuizBase):
    answer_index: int = Field(..., ge=0, description="Zero-based index of the correct option")

    @model_validator(mode="after")
    def answer_index_in_range(self):
        if self.answer_index >= len(self.options):
            raise ValueError(
                f"answer_index {self.answer_index} is out of range for {len(self.options)} options"
            )
        return self

class QuizPublic(QuizBase):
    """Client-facing quiz; the correct answer index is never included."""
    id: int

    class Config:
        from_attributes = True

# --- Lesson Schemas ---
class LessonBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    summary: str
    language: str = Field(DEFAULT_LANGUAGE, max_length=50)
    topic: str = Field(DEFAULT_TOPIC, max_length=100)

class LessonCreate(LessonBase):
    content: str
    quizzes: List[QuizCreate] = Field(default_factory=list)

class LessonSummary(LessonBase):
    id: int

    class Config:
        from_attributes = True

class LessonDetail(LessonSummary):
    content: str
    quizzes: List[QuizPublic] = []

# --- Catalog aggregates ---
class LanguageCount(BaseModel):
    language: str
    count: int

class TopicCount(BaseModel):
    topic: str
    count: int
