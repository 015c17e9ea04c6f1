import logging
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from config import settings
from student_directory.exceptions import StorageUnavailable

logger = logging.getLogger(__name__)

Base = declarative_base()


def get_connect_args(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=get_connect_args(settings.database_url),
    pool_pre_ping=True,
    echo=settings.sql_echo,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create the departments and students tables if they are missing."""
    # Registers the mapped tables on Base.metadata.
    from student_directory import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except OperationalError as e:
        logger.error(f"Failed to initialize database {settings.safe_database_url}: {e}")
        raise StorageUnavailable("initialize database", str(e.orig)) from e
    logger.info(f"Database ready at {settings.safe_database_url}")


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
