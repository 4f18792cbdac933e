"""Detection of tables that have not been migrated yet."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.orm import Session

from realestate.errors import MissingTableError

logger = logging.getLogger(__name__)

# PostgreSQL "undefined_table"
UNDEFINED_TABLE_SQLSTATE = "42P01"


def is_missing_table_error(exc: Exception) -> bool:
    """Return True if a DBAPI error was caused by a table that does not exist."""
    orig = getattr(exc, "orig", None)
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == UNDEFINED_TABLE_SQLSTATE:
        return True
    message = str(orig if orig is not None else exc).lower()
    return "no such table" in message or (
        "relation" in message and "does not exist" in message
    )


@contextmanager
def missing_table_guard(db: Session, table_label: str) -> Iterator[None]:
    """
    Translate a "table does not exist" database error into MissingTableError.

    The session is rolled back so it stays usable. Any other database error
    propagates unchanged.
    """
    try:
        yield
    except (OperationalError, ProgrammingError) as exc:
        if not is_missing_table_error(exc):
            raise
        db.rollback()
        logger.warning("%s table does not exist: %s", table_label, exc.orig)
        raise MissingTableError(
            f"{table_label} table does not exist. Please run the database migrations."
        ) from exc
