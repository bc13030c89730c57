from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

def create_db_engine(url: str, *, echo: bool = False) -> Engine:
    """Build the engine for `url`. SQLite gets FK enforcement so cascades fire."""
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, echo=echo)

    kwargs = {"connect_args": {"check_same_thread": False}, "echo": echo}
    if ":memory:" in url or url.rstrip("/").endswith("sqlite:"):
        # one shared connection, otherwise every checkout sees an empty db
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

    return engine

# Session factory
def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

# Dependency for FastAPI routes; the factory lives on app.state (see main.lifespan)
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
