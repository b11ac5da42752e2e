"""Database connection and session management."""
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.database.base import Base


def create_db_engine(settings: Settings) -> Engine:
    """Create a SQLAlchemy engine for the configured database URL."""
    url = settings.database_url
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            # One shared connection, otherwise every session sees an empty DB
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.debug, **kwargs)

    return create_engine(
        url,
        echo=settings.debug,  # Log SQL in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10
    )


class Database:
    """Engine + session factory owned by the application instance."""

    def __init__(self, settings: Settings):
        self.engine = create_db_engine(settings)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    def create_tables(self) -> None:
        """Create all tables known to the ORM metadata."""
        # Registers every model on Base.metadata
        import app.database.orm  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    async def health_check(self) -> tuple[bool, str | None]:
        """Check that the database answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True, None
        except Exception as e:
            return False, str(e)

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the Database attached to the running application."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function for FastAPI to get database session.

    Usage in FastAPI:
        @router.get("/companies")
        def list_companies(db: Session = Depends(get_db)):
            ...
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
