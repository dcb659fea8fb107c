"""Identity resolver: bearer token -> authenticated user for one request."""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from taskboard.core.errors import UnauthenticatedError
from taskboard.core.security import verified_subject
from taskboard.models.user import User, Role

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Principal of the current request; ``user`` is None when anonymous."""

    user: Optional[User] = None

    def is_authenticated(self) -> bool:
        return self.user is not None

    def is_admin(self) -> bool:
        return self.user is not None and self.user.role == Role.ADMIN

    def get_current_user(self) -> User:
        if self.user is None:
            raise UnauthenticatedError()
        return self.user


ANONYMOUS = Identity()


def resolve_identity(db: Session, authorization: Optional[str]) -> Identity:
    # Header absent, mal formé ou token invalide => anonyme, jamais d'erreur ici
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return ANONYMOUS

    token = authorization[len(BEARER_PREFIX):].strip()
    email = verified_subject(token)
    if email is None:
        logger.debug("Rejected bearer token, continuing as anonymous")
        return ANONYMOUS

    user = db.query(User).filter(User.email == email).first()
    if not user:
        logger.debug(f"Token subject {email} has no matching user, continuing as anonymous")
        return ANONYMOUS

    return Identity(user=user)
