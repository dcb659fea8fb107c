"""Task service: lifecycle of tasks, access checks delegated to access_control."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from taskboard.core.config import TaskDeletePolicy, settings
from taskboard.core.errors import (
    TaskCreationError,
    TaskHasCommentsError,
    TaskNotFoundError,
    UserIsNotAdminError,
    UserNotFoundError,
)
from taskboard.models.task import Task, TaskPriority, TaskStatus
from taskboard.models.user import User, Role
from taskboard.schemas.task import TaskCreate, TaskEdit
from taskboard.services import access_control
from taskboard.services.pagination import PageResult, paginate

logger = logging.getLogger(__name__)


def get_task(db: Session, task_id: int) -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise TaskNotFoundError()
    return task


def has_access(db: Session, current_user: User, task_id: int) -> bool:
    """Admin or assignee of the task. Raises TaskNotFoundError for a missing task."""
    return access_control.can_view_task(current_user, get_task(db, task_id))


def list_all_tasks(db: Session, current_user: User) -> List[Task]:
    access_control.require(
        access_control.can_list_all_tasks(current_user), current_user, "list all tasks"
    )
    return db.query(Task).order_by(Task.id).all()


def get_task_for_user(db: Session, current_user: User, task_id: int) -> Task:
    task = get_task(db, task_id)
    access_control.require(
        access_control.can_view_task(current_user, task),
        current_user,
        f"view task {task_id}",
        "You are not allowed to view this task",
    )
    return task


def create_task(db: Session, data: TaskCreate, author: User) -> Task:
    access_control.require(access_control.can_create_task(author), author, "create a task")

    # Les ids introuvables sont ignorés, on échoue seulement si aucun n'existe
    assignees = db.query(User).filter(User.id.in_(list(data.assignee_ids))).order_by(User.id).all()
    if not assignees:
        raise TaskCreationError()

    dropped = sorted(set(data.assignee_ids) - {user.id for user in assignees})
    if dropped:
        logger.info(f"Task creation by user {author.id}: ignoring unknown assignee ids {dropped}")

    task = Task(
        title=data.title,
        description=data.description,
        priority=data.priority,
        status=TaskStatus.TODO,
        author=author,
        assignees=assignees,
    )
    db.add(task)
    db.commit()
    db.refresh(task)

    logger.info(f"Task created: {task.id} by user {author.id}, assignees {[u.id for u in assignees]}")
    return task


def edit_task(db: Session, current_user: User, task_id: int, data: TaskEdit) -> Task:
    access_control.require(
        access_control.can_manage_task(current_user), current_user, f"edit task {task_id}"
    )
    task = get_task(db, task_id)

    if data.title is not None and data.title.strip():
        task.title = data.title

    if data.description is not None and data.description.strip():
        task.description = data.description

    if data.priority is not None:
        task.priority = data.priority

    if data.status is not None:
        task.status = data.status

    if data.assignee_ids is not None:
        # Remplace l'ensemble complet, chaque id doit exister
        users = []
        for user_id in sorted(data.assignee_ids):
            user = db.query(User).filter(User.id == user_id).first()
            if not user:
                db.rollback()
                raise UserNotFoundError(f"User with id {user_id} not found")
            users.append(user)
        task.assignees = users

    db.commit()
    db.refresh(task)

    logger.info(f"Task edited: {task.id} by user {current_user.id}")
    return task


def delete_task(db: Session, current_user: User, task_id: int, policy: TaskDeletePolicy = None):
    """Delete a task; its comments follow ``TASK_DELETE_POLICY`` (cascade or reject)."""
    access_control.require(
        access_control.can_manage_task(current_user), current_user, f"delete task {task_id}"
    )
    policy = policy or settings.TASK_DELETE_POLICY
    task = get_task(db, task_id)

    if policy == TaskDeletePolicy.REJECT and task.comments:
        raise TaskHasCommentsError()

    comment_count = len(task.comments)
    db.delete(task)
    db.commit()

    logger.info(f"Task deleted: {task_id} by user {current_user.id} ({comment_count} comments removed)")


def list_tasks_by_author(
    db: Session,
    current_user: User,
    author_id: int,
    priority: Optional[TaskPriority],
    status: Optional[TaskStatus],
    page: int,
    size: int,
) -> PageResult:
    access_control.require(
        access_control.can_list_tasks_by_author(current_user),
        current_user,
        f"list tasks of author {author_id}",
    )

    author = db.query(User).filter(User.id == author_id).first()
    if not author:
        raise UserNotFoundError()
    if author.role != Role.ADMIN:
        raise UserIsNotAdminError()

    query = db.query(Task).filter(Task.author_id == author_id)
    return paginate(_filter(query, priority, status).order_by(Task.id), page, size)


def list_tasks_by_assignee(
    db: Session,
    current_user: User,
    assignee_id: int,
    priority: Optional[TaskPriority],
    status: Optional[TaskStatus],
    page: int,
    size: int,
) -> PageResult:
    # ici le contrôle d'accès passe avant l'existence de l'utilisateur
    access_control.require(
        access_control.can_list_tasks_by_assignee(current_user, assignee_id),
        current_user,
        f"list tasks of assignee {assignee_id}",
        "You are not allowed to view this information",
    )

    if not db.query(User).filter(User.id == assignee_id).first():
        raise UserNotFoundError()

    query = db.query(Task).join(Task.assignees).filter(User.id == assignee_id)
    return paginate(_filter(query, priority, status).order_by(Task.id), page, size)


def update_task_status(db: Session, current_user: User, task_id: int, new_status: TaskStatus) -> Task:
    task = get_task(db, task_id)
    access_control.require(
        access_control.can_update_task_status(current_user, task),
        current_user,
        f"change status of task {task_id}",
        "You are not allowed to change the status of this task",
    )

    previous = task.status
    task.status = new_status
    db.commit()
    db.refresh(task)

    logger.info(f"Task {task.id} status {previous.value} -> {new_status.value} by user {current_user.id}")
    return task


def _filter(query, priority: Optional[TaskPriority], status: Optional[TaskStatus]):
    if priority is not None:
        query = query.filter(Task.priority == priority)
    if status is not None:
        query = query.filter(Task.status == status)
    return query
