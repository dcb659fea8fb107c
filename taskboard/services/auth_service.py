"""Registration, login and role upgrade"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.core.config import AdminUpgradePolicy, settings
from taskboard.core.errors import (
    AlreadyAuthenticatedError,
    EmailAlreadyTakenError,
    InvalidCredentialsError,
)
from taskboard.core.security import create_access_token
from taskboard.models.user import User, Role
from taskboard.schemas.user import AuthRequest
from taskboard.services import access_control
from taskboard.services.identity import Identity

logger = logging.getLogger(__name__)


def register(db: Session, identity: Identity, data: AuthRequest) -> User:
    if identity.is_authenticated():
        raise AlreadyAuthenticatedError()

    # Vérifie si l'email existe déjà
    if db.query(User).filter(User.email == data.email).first():
        raise EmailAlreadyTakenError()

    user = User(email=data.email, role=Role.USER)
    user.set_password(data.password)

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # inscription concurrente avec le même email
        db.rollback()
        raise EmailAlreadyTakenError()
    db.refresh(user)

    logger.info(f"User registered: {user.email} (ID: {user.id})")
    return user


def login(db: Session, identity: Identity, data: AuthRequest) -> str:
    if identity.is_authenticated():
        raise AlreadyAuthenticatedError()

    user = db.query(User).filter(User.email == data.email).first()
    # même erreur pour email inconnu et mauvais password
    if not user or not user.verify_password(data.password):
        raise InvalidCredentialsError()

    logger.info(f"User logged in: {user.email} (ID: {user.id})")
    return create_access_token(user.email)


def upgrade_to_admin(db: Session, current_user: User, policy: AdminUpgradePolicy = None) -> User:
    """Give the current user the ADMIN role.

    Who may do this is decided by ``ADMIN_UPGRADE_POLICY``. The default,
    ``authenticated``, lets any logged-in user promote themself.
    """
    policy = policy or settings.ADMIN_UPGRADE_POLICY
    access_control.require(
        access_control.can_upgrade_to_admin(current_user, policy),
        current_user,
        "upgrade to admin",
        "Role upgrade is not allowed",
    )

    current_user.role = Role.ADMIN
    db.commit()
    db.refresh(current_user)

    if policy == AdminUpgradePolicy.AUTHENTICATED:
        logger.warning(f"User {current_user.id} self-upgraded to ADMIN (policy: {policy.value})")
    else:
        logger.info(f"User {current_user.id} upgraded to ADMIN (policy: {policy.value})")
    return current_user
