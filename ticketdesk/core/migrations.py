# ticketdesk/core/migrations.py
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from ticketdesk.core.database import Database

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


def alembic_config() -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    return config


def run_migrations(db: Database, revision: str = "head") -> None:
    # Runs on the app's own engine, before requests are accepted
    config = alembic_config()
    with db.engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, revision)
    logger.info("Database schema upgraded to %s", revision)
