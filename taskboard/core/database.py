from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from taskboard.core.config import settings

engine = create_engine(settings.DATABASE_URL, echo=False)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Dépendance session DB, une par requête"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
