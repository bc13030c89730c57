# app/main.py
import time
import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.db import Base, build_session_factory, create_db_engine
from app.routers.exercises import router as exercises_router
from app.routers.workouts import router as workouts_router
from app.settings import Settings, get_settings
from app import models  # noqa: F401  # registers tables on Base.metadata

log = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store at startup and close it at shutdown; routes reach it via app.state."""
    settings = app.state.settings
    engine = create_db_engine(settings.DATABASE_URL)
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(engine)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    log.info("store ready env=%s", settings.ENV)
    try:
        yield
    finally:
        engine.dispose()

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Workout Tracker API",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "workouts", "description": "Workouts by day, create and edit"},
            {"name": "exercises", "description": "Shared exercise catalogue"},
        ],
    )
    app.state.settings = settings

    # CORS (relax for local dev; tighten origins in prod via env)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS.split(","),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id_and_log(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = req_id
        log.info("rid=%s %s %s -> %s in %.1fms",
                 req_id, request.method, request.url.path, response.status_code, duration_ms)
        return response

    @app.get("/")
    def root():
        return {"ok": True, "name": "Workout Tracker API"}

    @app.get("/ping")
    def ping():
        return {"pong": True}

    @app.get("/healthz")
    def healthz(request: Request):
        # Quick DB sanity check
        try:
            with request.app.state.session_factory() as db:
                db.execute(text("SELECT 1"))
            return {"status": "ok"}
        except Exception:
            log.exception("healthz: store check failed")
            return {"status": "degraded"}

    @app.get("/version")
    def version():
        return {"version": settings.API_VERSION}

    # Routers
    app.include_router(workouts_router)
    app.include_router(exercises_router)
    return app

app = create_app()
