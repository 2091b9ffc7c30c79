"""
Database migration runner for Alembic migrations.
"""
import logging
import os
from typing import List, Optional

from alembic.config import Config
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, text

logger = logging.getLogger(__name__)

ADVISORY_LOCK_ID = 987654321
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_alembic_config(database_url: Optional[str] = None) -> Config:
    """Build the Alembic config from alembic.ini with the URL overridden."""
    from app.core import config as app_config

    url = database_url or app_config.DATABASE_URL
    if not url:
        raise ValueError("DATABASE_URL is not set")

    alembic_cfg = Config(os.path.join(PROJECT_ROOT, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(PROJECT_ROOT, "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", url)
    return alembic_cfg


def run_migrations(target: str = "head", database_url: Optional[str] = None):
    """
    Upgrade the database to ``target``.
    Uses a PostgreSQL advisory lock to prevent concurrent migrations.
    """
    alembic_cfg = get_alembic_config(database_url)
    url = alembic_cfg.get_main_option("sqlalchemy.url")

    logger.info(f"Running alembic upgrade {target}")

    engine = create_engine(url, pool_pre_ping=True)
    lock_conn = None

    try:
        if url.startswith("postgresql"):
            # Keep the connection open to hold the lock
            lock_conn = engine.connect()
            try:
                lock_conn.execute(text("SELECT pg_advisory_lock(:lock_id)"), {"lock_id": ADVISORY_LOCK_ID})
                lock_conn.commit()
                logger.info("Migration lock acquired")
            except Exception as lock_error:
                logger.warning(f"Could not acquire advisory lock: {lock_error}")
                lock_conn.close()
                lock_conn = None

        command.upgrade(alembic_cfg, target)
        logger.info("Migrations complete")

    except Exception:
        logger.exception("Migration failed")
        raise
    finally:
        if lock_conn is not None:
            try:
                lock_conn.execute(text("SELECT pg_advisory_unlock(:lock_id)"), {"lock_id": ADVISORY_LOCK_ID})
                lock_conn.commit()
            finally:
                lock_conn.close()
        engine.dispose()


def downgrade_migrations(target: str, database_url: Optional[str] = None):
    """Downgrade to ``target`` ("-1", "base" or a revision id)."""
    alembic_cfg = get_alembic_config(database_url)
    logger.info(f"Running alembic downgrade {target}")
    try:
        command.downgrade(alembic_cfg, target)
    except Exception:
        logger.exception("Downgrade failed")
        raise
    logger.info("Downgrade complete")


def current_revision(database_url: Optional[str] = None) -> Optional[str]:
    """Revision recorded in the alembic_version table, or None for an empty database."""
    alembic_cfg = get_alembic_config(database_url)
    engine = create_engine(alembic_cfg.get_main_option("sqlalchemy.url"))
    try:
        with engine.connect() as connection:
            return MigrationContext.configure(connection).get_current_revision()
    finally:
        engine.dispose()


def revision_history() -> List[str]:
    """Revision ids from base to head."""
    script = ScriptDirectory.from_config(get_alembic_config())
    return [rev.revision for rev in reversed(list(script.walk_revisions()))]
