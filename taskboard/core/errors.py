"""
Task board error hierarchy.

Every failure the services can detect is raised as a subclass of
TaskBoardError and travels unchanged up to the HTTP boundary, where
main.py turns it into ``{"detail": message}`` with the class status code.

Hierarchy:
    TaskBoardError
    ├── AlreadyAuthenticatedError  409
    ├── EmailAlreadyTakenError     400
    ├── InvalidCredentialsError    400
    ├── UserNotFoundError          404
    ├── TaskNotFoundError          404
    ├── CommentNotFoundError       404
    ├── UserIsNotAdminError        403
    ├── UnauthorizedError          403  access rule denied a resolved user
    ├── UnauthenticatedError       401  no principal on the request
    ├── TaskCreationError          400
    ├── TaskHasCommentsError       409
    └── ConfigurationError         500
"""

from typing import Any, Dict, Optional


class TaskBoardError(Exception):
    """Base error; subclasses set status_code and default_message."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.status_code}: {self.message})"


class AlreadyAuthenticatedError(TaskBoardError):
    status_code = 409
    default_message = "You are already authenticated"


class EmailAlreadyTakenError(TaskBoardError):
    status_code = 400
    default_message = "This email is already taken"


class InvalidCredentialsError(TaskBoardError):
    # même message pour email inconnu et mauvais password
    status_code = 400
    default_message = "Invalid email or password"


class UserNotFoundError(TaskBoardError):
    status_code = 404
    default_message = "User not found"


class TaskNotFoundError(TaskBoardError):
    status_code = 404
    default_message = "Task not found"


class CommentNotFoundError(TaskBoardError):
    status_code = 404
    default_message = "Comment not found"


class UserIsNotAdminError(TaskBoardError):
    status_code = 403
    default_message = "This user is not an administrator and cannot author tasks"


class UnauthorizedError(TaskBoardError):
    status_code = 403
    default_message = "You are not allowed to perform this operation"


class UnauthenticatedError(TaskBoardError):
    status_code = 401
    default_message = "You are not authenticated, please log in"


class TaskCreationError(TaskBoardError):
    status_code = 400
    default_message = "None of the requested assignees exist"


class TaskHasCommentsError(TaskBoardError):
    status_code = 409
    default_message = "Task still has comments and cannot be deleted"


class ConfigurationError(TaskBoardError):
    status_code = 500
    default_message = "Server misconfiguration"
