from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

# Schemas commentaires

class CommentCreate(BaseModel):
    content: str = Field(min_length=1, max_length=5000)

class CommentEdit(BaseModel):
    content: str = Field(min_length=1, max_length=5000)

class CommentResponse(BaseModel):
    id: int
    task_id: int
    content: str
    author_email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
