import logging
from typing import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import AppError, StoreFailureError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, on_integrity_error: Callable[[IntegrityError], AppError]):
    """Commit the unit of work, rolling back and translating store errors.

    Unique and foreign key violations raised by the database become the
    business error built by ``on_integrity_error``; anything else the store
    rejects becomes a ``StoreFailureError``.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Integrity error on commit: %s", e.orig)
        raise on_integrity_error(e) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error on commit")
        raise StoreFailureError(
            f"Database error: {e.__class__.__name__}") from e


def contains_pattern(term: str) -> str:
    # Literal substring match: LIKE wildcards in the term are escaped
    escaped = (
        term.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"
