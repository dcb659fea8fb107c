"""Task model"""

import enum

from sqlalchemy import Column, Integer, String, ForeignKey, Table, Enum, Text, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from taskboard.core.database import Base


class TaskPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TaskStatus(str, enum.Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


# Table de jointure tâche <-> assignés
task_assignees = Table(
    "task_assignees",
    Base.metadata,
    Column("task_id", Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String(70), nullable=False)
    description = Column(Text, nullable=False)
    priority = Column(Enum(TaskPriority), nullable=False, index=True)
    status = Column(Enum(TaskStatus), nullable=False, default=TaskStatus.TODO, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    author = relationship("User", foreign_keys=[author_id])
    assignees = relationship("User", secondary=task_assignees, order_by="User.id")
    comments = relationship(
        "Comment",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="Comment.id",
    )
