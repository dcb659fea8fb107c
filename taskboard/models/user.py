import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum
from datetime import datetime
from taskboard.core.database import Base
from taskboard.core.security import hash_password, verify_password


class Role(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(70), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(Role), nullable=False, default=Role.USER)
    created_at = Column(DateTime, default=datetime.utcnow)

    def set_password(self, password: str):
        self.password_hash = hash_password(password)

    def verify_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
