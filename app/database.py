"""Engine, session factory and the request-scoped session dependency."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .core import get_settings


settings = get_settings()

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=settings.DATABASE_CONNECT_ARGS,
    future=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

#: Declarative base shared by :mod:`app.models`
Base = declarative_base()


def get_db():
    """
    Yield a session for one request and close it afterwards.

    Routes and the authentication dependency share the same session
    within a request, so the resolved user can be mutated and committed
    by the route.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
