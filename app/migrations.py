import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection

from app.config import DATABASE_URL

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def make_alembic_config(database_url: str | None = DATABASE_URL) -> Config:
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    if database_url:
        # configparser interpolation
        config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def upgrade_database(connection: Connection, revision: str = "head") -> None:
    """Run migrations on an open (sync) connection, e.g. via AsyncConnection.run_sync."""
    config = make_alembic_config(None)
    config.attributes["connection"] = connection
    config.attributes["configure_logger"] = False
    command.upgrade(config, revision)
    logger.info("Database migrated to %s", revision)
