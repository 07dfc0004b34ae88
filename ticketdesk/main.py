# ticketdesk/main.py
import logging
from contextlib import asynccontextmanager

from alembic.util import CommandError
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from ticketdesk.account.routes import router as account_router
from ticketdesk.core.config import Settings, get_settings
from ticketdesk.core.database import Database
from ticketdesk.core.errors import register_exception_handlers
from ticketdesk.core.migrations import run_migrations
from ticketdesk.submission.routes import router as submission_router
from ticketdesk.ticket.routes import router as ticket_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    app.state.db = None

    # A store that cannot be reached is logged, the listener still starts
    try:
        db = Database(settings.db_url)
    except (ValueError, ImportError, SQLAlchemyError):
        logger.exception("Could not configure the database")
    else:
        app.state.db = db
        try:
            db.ping()
            run_migrations(db)
        except (SQLAlchemyError, CommandError):
            logger.exception("Could not connect to or migrate the database")
        else:
            logger.info("Connected to the database")

    try:
        yield
    finally:
        if app.state.db is not None:
            app.state.db.dispose()
            logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESC,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routers
    app.include_router(account_router)
    app.include_router(ticket_router)
    app.include_router(submission_router)

    @app.get("/api/test", tags=["Health"], response_class=PlainTextResponse)
    def health():
        return "API funcionando"

    return app


app = create_app()
