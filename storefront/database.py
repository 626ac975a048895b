# storefront/database.py
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from storefront.core.errors import Internal

logger = logging.getLogger(__name__)


def _with_sslmode(url: str) -> str:
    """Append sslmode=require if it is not already present."""
    if "sslmode=" in url:
        return url
    if "?" in url:
        return url + "&sslmode=require"
    return url + "?sslmode=require"


class Database:
    """
    Owns the SQLAlchemy engine for one application instance.

    Lifecycle (driven by the app lifespan):
      - __init__     : build the engine (no connection yet)
      - create_all() : connect and create missing tables
      - session()    : scoped Session for one request
      - dispose()    : release every pooled connection

    Postgres:
      - sslmode=require   : enforce SSL when running in the cloud
      - pool_pre_ping=True: validate connections before using them

    SQLite (tests / local dev):
      - one shared connection via StaticPool so ":memory:" survives
        across sessions and threads
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        if url.startswith("sqlite"):
            self.engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            if url.startswith("postgres"):
                url = _with_sslmode(url)
            self.engine = create_engine(url, echo=echo, pool_pre_ping=True)

    def create_all(self) -> None:
        """Create all tables defined in SQLModel metadata if they do not exist."""
        SQLModel.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session

    def dispose(self) -> None:
        self.engine.dispose()


def get_session(request: Request) -> Iterator[Session]:
    """
    FastAPI dependency that yields a SQLModel Session from the
    Database attached to the running app.

    Usage:

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    db: Database = request.app.state.db
    with db.session() as session:
        yield session


@contextmanager
def store_write(session: Session, action: str) -> Iterator[None]:
    """
    Wrap a store mutation.

    Any SQLAlchemyError rolls the session back and is re-raised as
    Internal carrying the driver message. No retries.
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Store operation failed (%s): %s", action, e)
        raise Internal("store operation failed", error=str(e)) from e
