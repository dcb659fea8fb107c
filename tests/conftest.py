import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Config de test AVANT d'importer taskboard (Settings lit l'env à l'import)
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Créer engine SQLite pour tests AVANT d'importer app
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"
test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# PATCH: remplacer le engine et SessionLocal du core.database AVANT d'importer app
import taskboard.core.database
taskboard.core.database.engine = test_engine
taskboard.core.database.SessionLocal = TestingSessionLocal

# Maintenant importer app (qui utilisera notre engine SQLite)
from taskboard.core.database import Base, get_db
from taskboard.core.security import create_access_token
from taskboard.main import app
from taskboard.models.user import User, Role
from taskboard.models.task import Task, TaskPriority, TaskStatus
from taskboard.models.comment import Comment


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client():
    """Client de test FastAPI"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = TestingSessionLocal()
    yield db
    db.close()


@pytest.fixture
def make_user(db):
    """Fabrique d'utilisateurs persistés"""
    def _make_user(email, role=Role.USER, password="password123"):
        user = User(email=email, role=role)
        user.set_password(password)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_task(db):
    """Fabrique de tâches persistées, directement en base"""
    def _make_task(author, assignees, title="Task", priority=TaskPriority.MEDIUM,
                   status=TaskStatus.TODO, description="Description"):
        task = Task(
            title=title,
            description=description,
            priority=priority,
            status=status,
            author=author,
            assignees=list(assignees),
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        return task
    return _make_task


@pytest.fixture
def make_comment(db):
    def _make_comment(task, author, content="A comment"):
        comment = Comment(task=task, author=author, content=content)
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return comment
    return _make_comment


@pytest.fixture
def admin(make_user):
    return make_user("admin@example.com", role=Role.ADMIN)


@pytest.fixture
def alice(make_user):
    return make_user("alice@example.com")


@pytest.fixture
def bob(make_user):
    return make_user("bob@example.com")


@pytest.fixture
def auth_header():
    """Header Authorization avec un JWT pour un utilisateur"""
    def _auth_header(user):
        return {"Authorization": f"Bearer {create_access_token(user.email)}"}
    return _auth_header
