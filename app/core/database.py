"""PostgreSQL connection, session management and the transaction boundary."""

from collections.abc import Callable, Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SessionFactory = Callable[[], Session]


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory() -> SessionFactory:
    """Dependency returning the factory services use to open their own sessions."""
    return SessionLocal


@contextmanager
def transaction(session_factory: SessionFactory) -> Iterator[Session]:
    """
    Open a session and run the body inside one transaction.

    Commits when the body exits normally, rolls back when it raises, and
    closes the session on every exit path.
    """
    session = session_factory()
    try:
        with session.begin():
            yield session
    finally:
        session.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
