"""PostgreSQL connection helpers."""

import logging
import os
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2.extensions import connection as Connection, cursor as Cursor

logger = logging.getLogger(__name__)

CONNECTION_STRING_ENV = "POSTGRES_CONNECTION_STRING"


def get_connection() -> Connection:
    """Create a new database connection from POSTGRES_CONNECTION_STRING."""
    return psycopg2.connect(os.environ[CONNECTION_STRING_ENV])


@contextmanager
def connect() -> Iterator[Connection]:
    """Open a database connection and close it on exit, whatever the outcome."""
    logger.info("Connecting to the database...")
    conn = get_connection()
    logger.info("Connected to the database successfully.")
    try:
        yield conn
    finally:
        conn.close()
        logger.info("Database connection closed.")


@contextmanager
def transaction(conn: Connection) -> Iterator[Cursor]:
    """Context manager for a cursor with automatic commit/rollback."""
    try:
        with conn.cursor() as cur:
            yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
