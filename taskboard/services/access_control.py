"""
Access control rules for tasks and comments.

Pure decision functions: they take the resolved current user and the
target resource and answer allow/deny. They never touch the database and
never raise; callers load the resource first (so a missing task or comment
is reported before the rule runs) and turn a denial into an error with
``require``.

    list all tasks            admin
    view task                 admin or assignee
    create / edit / delete    admin
    list tasks by author      admin
    list tasks by assignee    admin or the assignee themself
    update task status        admin or assignee
    view / create comments    same as view task (task_service.has_access)
    edit / delete comment     comment author only, whatever the role
    upgrade to admin          depends on AdminUpgradePolicy
"""

import logging

from taskboard.core.config import AdminUpgradePolicy
from taskboard.core.errors import UnauthorizedError
from taskboard.models.user import User, Role
from taskboard.models.task import Task
from taskboard.models.comment import Comment

logger = logging.getLogger(__name__)


def is_admin(user: User) -> bool:
    return user.role == Role.ADMIN


def is_assignee(user: User, task: Task) -> bool:
    return any(assignee.id == user.id for assignee in task.assignees)


def can_list_all_tasks(user: User) -> bool:
    return is_admin(user)


def can_view_task(user: User, task: Task) -> bool:
    return is_admin(user) or is_assignee(user, task)


def can_create_task(user: User) -> bool:
    return is_admin(user)


def can_manage_task(user: User) -> bool:
    """Edit and delete."""
    return is_admin(user)


def can_list_tasks_by_author(user: User) -> bool:
    return is_admin(user)


def can_list_tasks_by_assignee(user: User, assignee_id: int) -> bool:
    return is_admin(user) or user.id == assignee_id


def can_update_task_status(user: User, task: Task) -> bool:
    return can_view_task(user, task)


def can_modify_comment(user: User, comment: Comment) -> bool:
    # même un admin ne peut pas toucher au commentaire d'un autre
    return comment.author is not None and comment.author.id == user.id


def can_upgrade_to_admin(user: User, policy: AdminUpgradePolicy) -> bool:
    if policy == AdminUpgradePolicy.AUTHENTICATED:
        return True
    if policy == AdminUpgradePolicy.ADMIN:
        return is_admin(user)
    return False


def require(allowed: bool, user: User, action: str, message: str = None):
    """Raise UnauthorizedError when a rule denied ``action`` to ``user``."""
    if not allowed:
        logger.warning(f"Access denied: user {user.id} ({user.role.value}) tried to {action}")
        raise UnauthorizedError(message)
