"""
PostgreSQL connection helpers

Centralizes every way the repositories reach the database:
- psycopg2 connections with RealDictCursor (rows as dictionaries)
- Retry logic for transient connection failures

Author: TM3
Updated: 2025-10-17
"""
import logging
import time
from typing import Optional

import psycopg2
from psycopg2.extras import RealDictCursor

from orderdesk.core.config import settings

logger = logging.getLogger(__name__)


class DatabaseNotConfiguredError(RuntimeError):
    """Raised when no connection string is given and DATABASE_URL is unset"""


def _database_url(database_url: Optional[str] = None) -> str:
    url = database_url or settings.DATABASE_URL
    if not url:
        raise DatabaseNotConfiguredError("DATABASE_URL not configured")
    return url


def rollback_quietly(conn) -> None:
    """
    Roll back a transaction, logging instead of raising if the rollback fails

    A connection lost mid-transaction raises InterfaceError on rollback;
    the server has already discarded that transaction.
    """
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning(f"Rollback failed: {e}")


def get_db_connection_dict(database_url: Optional[str] = None):
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Args:
        database_url: Connection string (defaults to settings.DATABASE_URL)

    Returns:
        psycopg2 connection with RealDictCursor
    """
    return psycopg2.connect(
        _database_url(database_url),
        cursor_factory=RealDictCursor,
        connect_timeout=settings.DB_CONNECT_TIMEOUT,
    )


def get_db_connection_dict_with_retry(
    database_url: Optional[str] = None,
    max_retries: Optional[int] = None,
    retry_delay: Optional[float] = None,
):
    """
    Get a RealDictCursor connection with automatic retry on connection failures

    Retries failed connections up to max_retries times with exponential
    backoff between attempts. Non-connection errors fail immediately.

    Args:
        database_url: Connection string (defaults to settings.DATABASE_URL)
        max_retries: Maximum number of connection attempts (default: settings.DB_MAX_RETRIES)
        retry_delay: Initial delay between retries in seconds (default: settings.DB_RETRY_DELAY)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
        ValueError: If max_retries is less than 1
    """
    max_retries = settings.DB_MAX_RETRIES if max_retries is None else max_retries
    retry_delay = settings.DB_RETRY_DELAY if retry_delay is None else retry_delay

    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = get_db_connection_dict(database_url)
            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt == max_retries:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

            delay = retry_delay * (2 ** (attempt - 1))
            logger.info(f"Retrying in {delay:.2f} seconds...")
            time.sleep(delay)

