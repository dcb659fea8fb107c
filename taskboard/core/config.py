from enum import Enum
from os import getenv
from taskboard.core.errors import ConfigurationError


class AdminUpgradePolicy(str, Enum):
    AUTHENTICATED = "authenticated"  # tout utilisateur connecté peut devenir admin
    ADMIN = "admin"
    DISABLED = "disabled"


class TaskDeletePolicy(str, Enum):
    CASCADE = "cascade"
    REJECT = "reject"


def _policy(enum_cls, name: str, default: str):
    raw = getenv(name, default).strip().lower()
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(p.value for p in enum_cls)
        raise ConfigurationError(f"{name} must be one of: {allowed} (got {raw!r})")


class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://taskboard:taskboard@db:5432/taskboard")
    JWT_SECRET = getenv("JWT_SECRET")  # pas de valeur par défaut, à injecter
    JWT_ALGORITHM = "HS256"
    BCRYPT_ROUNDS = int(getenv("BCRYPT_ROUNDS", "12"))
    ADMIN_UPGRADE_POLICY = _policy(AdminUpgradePolicy, "ADMIN_UPGRADE_POLICY", "authenticated")
    TASK_DELETE_POLICY = _policy(TaskDeletePolicy, "TASK_DELETE_POLICY", "cascade")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
