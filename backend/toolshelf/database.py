import logging
from typing import Optional

#Creates a connection engine to your database.
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
#Base class for SQLAlchemy ORM models and factory for creating database sessions.
from sqlalchemy.orm import declarative_base, sessionmaker, Session
#Configuration object containing the database URL
from .config import settings
from .utils.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if settings.database_url.startswith("sqlite") else {},
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class
Base = declarative_base()

# Dependency to get DB session
def get_db():
    #Creates a new database session.
    db = SessionLocal()
    try:
        #Makes it available to route functions.
        yield db
    finally:
        db.close() #Ensures the session is closed properly


def commit_or_raise(
    db: Session,
    message: str = "Internal server error",
    conflict_message: Optional[str] = None,
) -> None:
    """Commit the session, turning persistence failures into API errors.

    A unique-constraint violation becomes a ConflictError when
    ``conflict_message`` is given. Anything else is logged with its traceback,
    rolled back and re-raised as an InternalError carrying only ``message``.
    """
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if conflict_message:
            raise ConflictError(conflict_message)
        logger.exception("Database commit failed")
        raise InternalError(message)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database commit failed")
        raise InternalError(message)


        #One engine, one session factory and a per-request session dependency with guaranteed cleanup.
