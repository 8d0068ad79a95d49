"""
Create the credit application schema in the configured database.

Reads DATABASE_URL (or the POSTGRES_* parts) through the application
settings, checks the connection, then creates any missing tables.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --drop
"""

import argparse
import logging

from sqlalchemy import create_engine, text

from credit_app.core.config import settings
from credit_app.infrastructure.credit.tables import create_schema, metadata
from credit_app.shared.logging import configure_logging

logger = logging.getLogger("init_db")


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the credit application schema")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables first (destroys all customers and credits)",
    )
    args = parser.parse_args()

    configure_logging(settings.log_level)
    engine = create_engine(settings.get_database_url(), pool_pre_ping=True)
    logger.info("Engine url: %s", engine.url.render_as_string(hide_password=True))

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))

    if args.drop:
        metadata.drop_all(engine)
        logger.warning("Dropped tables: %s", ", ".join(metadata.tables))

    create_schema(engine)
    logger.info("Schema ready: %s", ", ".join(metadata.tables))


if __name__ == "__main__":
    main()
