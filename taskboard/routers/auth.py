from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.models.user import User
from taskboard.routers.deps import get_identity, get_current_user
from taskboard.schemas.user import AuthRequest, UserResponse, TokenResponse
from taskboard.services import auth_service
from taskboard.services.identity import Identity

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse)
def register(
    data: AuthRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity)
):
    """Créer un nouvel utilisateur (rôle USER)"""
    return auth_service.register(db, identity, data)


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: AuthRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity)
):
    """Se connecter et recevoir un token valable 24h"""
    token = auth_service.login(db, identity, credentials)
    return {"access_token": token, "token_type": "bearer"}


@router.patch("/upgrade-to-admin", response_model=UserResponse)
def upgrade_to_admin(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return auth_service.upgrade_to_admin(db, current_user)
