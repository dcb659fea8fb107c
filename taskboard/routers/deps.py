from fastapi import Depends, Header
from sqlalchemy.orm import Session
from typing import Optional

from taskboard.core.database import get_db
from taskboard.models.user import User
from taskboard.services.identity import Identity, resolve_identity


def get_identity(
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(None)
) -> Identity:
    # Résolu une seule fois par requête puis passé explicitement aux services
    return resolve_identity(db, authorization)


def get_current_user(identity: Identity = Depends(get_identity)) -> User:
    return identity.get_current_user()
