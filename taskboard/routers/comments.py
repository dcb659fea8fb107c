from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.models.user import User
from taskboard.routers.deps import get_current_user
from taskboard.schemas.comment import CommentEdit, CommentResponse
from taskboard.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.patch("/{comment_id}", response_model=CommentResponse)
def edit_comment(
    comment_id: int,
    comment_data: CommentEdit,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    # Seul l'auteur peut modifier son commentaire
    return comment_service.edit_comment(db, current_user, comment_id, comment_data)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    comment_service.delete_comment(db, current_user, comment_id)
