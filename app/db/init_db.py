"""
Database initialization helpers.

`python -m app.db.init_db` creates the database named in DATABASE_URL when it
is missing, then creates every table registered on Base.metadata.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.db.session import get_engine
from app.models.base import Base

# imported so their tables get registered on Base.metadata
from app.models import label, todo  # noqa: F401

logger = logging.getLogger(__name__)

MAINTENANCE_DATABASE = "postgres"


def create_database() -> bool:
    """
    Create the target database if it does not exist yet.

    Returns True when a database was created.
    """
    url = make_url(settings.require_database_url())
    if not url.drivername.startswith("postgresql"):
        return False

    name = url.database
    admin_engine = create_engine(
        url.set(database=MAINTENANCE_DATABASE),
        isolation_level="AUTOCOMMIT",
    )
    try:
        with admin_engine.connect() as conn:
            exists = conn.execute(
                text("SELECT 1 FROM pg_database WHERE datname = :name"),
                {"name": name},
            ).scalar()
            if exists:
                logger.info("database %s already exists", name)
                return False

            quoted = admin_engine.dialect.identifier_preparer.quote(name)
            conn.execute(text(f"CREATE DATABASE {quoted}"))
            logger.info("created database %s", name)
            return True
    finally:
        admin_engine.dispose()


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=get_engine())
    logger.info("tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


def main() -> None:
    configure_logging(settings.log_level)
    create_database()
    init_db()


if __name__ == "__main__":
    main()
