"""Comment service"""

import logging
from typing import List

from sqlalchemy.orm import Session

from taskboard.core.errors import CommentNotFoundError
from taskboard.models.comment import Comment
from taskboard.models.user import User
from taskboard.schemas.comment import CommentCreate, CommentEdit
from taskboard.services import access_control
from taskboard.services.task_service import get_task, has_access

logger = logging.getLogger(__name__)


def get_comment(db: Session, comment_id: int) -> Comment:
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise CommentNotFoundError()
    return comment


def list_comments(db: Session, current_user: User, task_id: int) -> List[Comment]:
    access_control.require(
        has_access(db, current_user, task_id),
        current_user,
        f"view comments of task {task_id}",
        "You are not allowed to view the comments of this task",
    )
    return db.query(Comment).filter(Comment.task_id == task_id).order_by(Comment.id).all()


def create_comment(db: Session, current_user: User, task_id: int, data: CommentCreate) -> Comment:
    access_control.require(
        has_access(db, current_user, task_id),
        current_user,
        f"comment on task {task_id}",
        "You are not allowed to comment on this task",
    )
    task = get_task(db, task_id)

    comment = Comment(task=task, author=current_user, content=data.content)
    db.add(comment)
    db.commit()
    db.refresh(comment)

    logger.info(f"Comment created: {comment.id} on task {task_id} by user {current_user.id}")
    return comment


def edit_comment(db: Session, current_user: User, comment_id: int, data: CommentEdit) -> Comment:
    comment = get_comment(db, comment_id)
    access_control.require(
        access_control.can_modify_comment(current_user, comment),
        current_user,
        f"edit comment {comment_id}",
        "You are not allowed to edit this comment",
    )

    comment.content = data.content
    db.commit()
    db.refresh(comment)

    logger.info(f"Comment edited: {comment.id} by user {current_user.id}")
    return comment


def delete_comment(db: Session, current_user: User, comment_id: int):
    comment = get_comment(db, comment_id)
    access_control.require(
        access_control.can_modify_comment(current_user, comment),
        current_user,
        f"delete comment {comment_id}",
        "You are not allowed to delete this comment",
    )

    db.delete(comment)
    db.commit()

    logger.info(f"Comment deleted: {comment_id} by user {current_user.id}")
