from sqlalchemy import Column, Integer, String, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from kidcode.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships to other tables
    progress_entries = relationship("Progress", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    achievements = relationship("UserAchievement", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint('email', name='uq_user_email'),
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', display_name='{self.display_name}')>"
