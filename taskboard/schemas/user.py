from pydantic import BaseModel, ConfigDict, Field
from taskboard.models.user import Role

class AuthRequest(BaseModel):
    email: str = Field(min_length=1, max_length=70)
    password: str = Field(min_length=1)

class UserResponse(BaseModel):
    id: int
    email: str
    role: Role

    model_config = ConfigDict(from_attributes=True)

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
