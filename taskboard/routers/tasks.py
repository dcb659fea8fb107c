from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from taskboard.core.database import get_db
from taskboard.models.task import TaskPriority, TaskStatus
from taskboard.models.user import User
from taskboard.routers.deps import get_current_user
from taskboard.schemas.comment import CommentCreate, CommentResponse
from taskboard.schemas.task import TaskCreate, TaskEdit, TaskStatusUpdate, TaskResponse, TaskPage
from taskboard.services import comment_service, task_service
from taskboard.services.pagination import MAX_PAGE, MAX_PAGE_SIZE, PageResult

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _to_page(result: PageResult) -> TaskPage:
    return TaskPage(
        items=[TaskResponse.model_validate(task) for task in result.items],
        page=result.page,
        size=result.size,
        total=result.total,
        pages=result.pages,
    )


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.list_all_tasks(db, current_user)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    # l'auteur est l'admin qui crée la tâche
    return task_service.create_task(db, task_data, current_user)


# /author et /assignee avant /{task_id}
@router.get("/author", response_model=TaskPage)
def list_tasks_by_author(
    author_id: int = Query(...),
    page: int = Query(..., ge=0, le=MAX_PAGE),
    size: int = Query(..., ge=1, le=MAX_PAGE_SIZE),
    priority: Optional[TaskPriority] = Query(None),
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    result = task_service.list_tasks_by_author(
        db, current_user, author_id, priority, status_filter, page, size
    )
    return _to_page(result)


@router.get("/assignee", response_model=TaskPage)
def list_tasks_by_assignee(
    assignee_id: int = Query(...),
    page: int = Query(..., ge=0, le=MAX_PAGE),
    size: int = Query(..., ge=1, le=MAX_PAGE_SIZE),
    priority: Optional[TaskPriority] = Query(None),
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    result = task_service.list_tasks_by_assignee(
        db, current_user, assignee_id, priority, status_filter, page, size
    )
    return _to_page(result)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.get_task_for_user(db, current_user, task_id)


@router.patch("/{task_id}", response_model=TaskResponse)
def edit_task(
    task_id: int,
    task_data: TaskEdit,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.edit_task(db, current_user, task_id, task_data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task_service.delete_task(db, current_user, task_id)


@router.patch("/{task_id}/status", response_model=TaskResponse)
def update_status(
    task_id: int,
    body: TaskStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.update_task_status(db, current_user, task_id, body.status)


# ========== Commentaires d'une tâche ==========

@router.get("/{task_id}/comments", response_model=List[CommentResponse])
def list_comments(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return comment_service.list_comments(db, current_user, task_id)


@router.post("/{task_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    task_id: int,
    comment_data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return comment_service.create_comment(db, current_user, task_id, comment_data)
