# helpdesk/infrastructure/database/session.py

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session, sessionmaker

from helpdesk.config.settings import settings
from helpdesk.core.exceptions import StoreUnavailableError

_engine: Engine | None = None

_SessionLocal = sessionmaker(
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


def _default_engine_kwargs(url: str) -> dict[str, Any]:
    timeout = settings.db_timeout_seconds
    if url.startswith("postgresql"):
        return {
            "pool_timeout": timeout,
            "connect_args": {
                "connect_timeout": timeout,
                "options": f"-c statement_timeout={timeout * 1000}",
            },
        }
    return {}


def init_engine(url: str | None = None, **engine_kwargs: Any) -> Engine:
    global _engine

    url = url or settings.database_url
    kwargs = _default_engine_kwargs(url)
    kwargs.update(engine_kwargs)

    _engine = create_engine(url, echo=settings.debug, pool_pre_ping=True, **kwargs)
    _SessionLocal.configure(bind=_engine)
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        return init_engine()
    return _engine


@contextmanager
def db_session() -> Iterator[Session]:
    get_engine()
    session: Session = _SessionLocal()
    try:
        yield session
        session.commit()
    except (OperationalError, PoolTimeoutError) as e:
        session.rollback()
        raise StoreUnavailableError() from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
