from sqlalchemy import (
    Column, Integer, String, Text, ForeignKey, JSON, CheckConstraint
)
from sqlalchemy.orm import relationship

from kidcode.core.database import Base
from kidcode.models.enums import DEFAULT_LANGUAGE, DEFAULT_TOPIC

class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    summary = Column(Text, nullable=False)
    content = Column(Text, nullable=False)

    language = Column(String(50), nullable=False, default=DEFAULT_LANGUAGE, server_default=DEFAULT_LANGUAGE, index=True)
    topic = Column(String(100), nullable=False, default=DEFAULT_TOPIC, server_default=DEFAULT_TOPIC, index=True)

    # Relationships
    # Quizzes are presented and scored in creation order
    quizzes = relationship("Quiz", back_populates="lesson", cascade="all, delete-orphan", passive_deletes=True, order_by="Quiz.id")
    progress_entries = relationship("Progress", back_populates="lesson", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<Lesson(id={self.id}, title='{self.title}', language='{self.language}', topic='{self.topic}')>"

class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id", ondelete="CASCADE"), nullable=False, index=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # Ordered list of option strings
    answer_index = Column(Integer, nullable=False)  # Zero-based index into options; never sent to clients

    # Relationships
    lesson = relationship("Lesson", back_populates="quizzes")

    __table_args__ = (CheckConstraint('answer_index >= 0', name='ck_quiz_answer_index_non_negative'),)

    def __repr__(self):
        return f"<Quiz(id={self.id}, lesson_id={self.lesson_id})>"
