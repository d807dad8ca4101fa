"""
Shared plumbing for the PostgreSQL repositories

Author: TM3
Date: 2025-10-17
"""
import logging
import uuid
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

import psycopg2

from orderdesk.core.database import (
    DatabaseNotConfiguredError,
    get_db_connection_dict_with_retry,
    rollback_quietly,
)
from orderdesk.domain.errors import RepositoryError

logger = logging.getLogger(__name__)


def canonical_uuid(value: str) -> Optional[str]:
    """
    Canonical text form of a UUID (lowercase, hyphenated), as PostgreSQL
    renders id::text; None if the value is not a UUID
    """
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        return None


def valid_uuids(ids: Iterable[str]) -> List[str]:
    """
    Keep only IDs that are well-formed UUIDs, in canonical form, preserving order

    Malformed IDs cannot match a UUID primary key, so they are dropped
    instead of being sent to the database (where the cast would fail).
    """
    result = []
    for value in ids:
        canonical = canonical_uuid(value)
        if canonical is not None and canonical not in result:
            result.append(canonical)
    return result


class PostgresRepository:
    """
    Base class for psycopg2-backed repositories

    A repository built without a connection opens, commits and closes its own
    connection for every call. A repository built with a connection (see
    PostgresUnitOfWork) leaves commit, rollback and close to the owner.
    """

    def __init__(self, conn=None):
        self._conn = conn

    @contextmanager
    def _cursor(self, action: str) -> Iterator:
        should_close = self._conn is None
        conn = self._conn
        cursor = None

        try:
            if conn is None:
                conn = get_db_connection_dict_with_retry()
            cursor = conn.cursor()
            yield cursor
            if should_close:
                conn.commit()

        except (psycopg2.Error, DatabaseNotConfiguredError) as e:
            if should_close and conn is not None:
                rollback_quietly(conn)
            logger.error(f"Database error while trying to {action}: {e}")
            raise RepositoryError(f"could not {action}: {e}") from e

        except Exception:
            if should_close and conn is not None:
                rollback_quietly(conn)
            raise

        finally:
            if cursor is not None:
                cursor.close()
            if should_close and conn is not None:
                conn.close()
