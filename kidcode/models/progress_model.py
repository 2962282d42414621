from sqlalchemy import Column, Integer, Boolean, TIMESTAMP, ForeignKey, UniqueConstraint, false
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from kidcode.core.database import Base

class Progress(Base):
    __tablename__ = "progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id", ondelete="CASCADE"), nullable=False)

    started = Column(Boolean, nullable=False, default=False, server_default=false())  # Learning content acknowledged
    completed = Column(Boolean, nullable=False, default=False, server_default=false())  # Set by the last submission only
    score = Column(Integer, nullable=False, default=0, server_default="0")  # Correct answers on the last submission

    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="progress_entries")
    lesson = relationship("Lesson", back_populates="progress_entries")

    __table_args__ = (
        UniqueConstraint('user_id', 'lesson_id', name='uq_progress_user_lesson'),
    )

    def __repr__(self):
        return f"<Progress(id={self.id}, user_id={self.user_id}, lesson_id={self.lesson_id}, score={self.score}, completed={self.completed})>"
