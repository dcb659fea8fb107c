"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List, Set

from taskboard.models.task import TaskPriority, TaskStatus
from taskboard.schemas.user import UserResponse
from taskboard.schemas.comment import CommentResponse


class TaskCreate(BaseModel):
    """Schema for creating a task. Status is always TODO at creation."""

    title: str = Field(min_length=1, max_length=70)
    description: str = Field(min_length=1, max_length=70)
    priority: TaskPriority
    assignee_ids: Set[int] = Field(min_length=1)


class TaskEdit(BaseModel):
    """Partial edit: absent fields (and blank title/description) are left unchanged."""

    title: Optional[str] = Field(None, max_length=70)
    description: Optional[str] = Field(None, max_length=70)
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    assignee_ids: Optional[Set[int]] = None


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str
    priority: TaskPriority
    status: TaskStatus
    author: UserResponse
    assignees: List[UserResponse]
    comments: List[CommentResponse]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskPage(BaseModel):
    items: List[TaskResponse]
    page: int
    size: int
    total: int
    pages: int
