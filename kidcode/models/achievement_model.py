from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from kidcode.core.database import Base

class Achievement(Base):
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(100), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    # Relationships
    unlocks = relationship("UserAchievement", back_populates="achievement", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint('code', name='uq_achievement_code'),
    )

    def __repr__(self):
        return f"<Achievement(id={self.id}, code='{self.code}')>"

class UserAchievement(Base):
    """One row per (user, achievement); the first unlock time is kept forever."""
    __tablename__ = "user_achievements"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    achievement_id = Column(Integer, ForeignKey("achievements.id", ondelete="CASCADE"), primary_key=True)
    unlocked_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="achievements")
    achievement = relationship("Achievement", back_populates="unlocks")

    def __repr__(self):
        return f"<UserAchievement(user_id={self.user_id}, achievement_id={self.achievement_id}, unlocked_at={self.unlocked_at})>"
