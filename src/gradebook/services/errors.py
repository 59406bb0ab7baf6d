"""Store-level failures surfaced by the service layer."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the relational store rejects or cannot run a statement."""

    def __init__(self, detail: str, status_code: int = 500) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class ConstraintViolation(StoreError):
    """A unique, foreign-key, not-null or check constraint failed."""


class ConnectivityFailure(StoreError):
    """The pool or the store could not be reached."""


class RecordNotFound(StoreError):
    """An update or delete matched no row and the caller asked to be told."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(f"{entity} {record_id} not found", status_code=404)
        self.entity = entity
        self.record_id = record_id


def driver_message(exc: DBAPIError) -> str:
    """Return the raw message reported by the database driver."""

    return str(exc.orig) if exc.orig is not None else str(exc)


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise SQLAlchemy driver errors as :class:`StoreError` subclasses."""

    try:
        yield
    except IntegrityError as exc:
        logger.warning("constraint violation: %s", driver_message(exc))
        raise ConstraintViolation(driver_message(exc)) from exc
    except (OperationalError, InterfaceError) as exc:
        logger.error("store unreachable: %s", driver_message(exc))
        raise ConnectivityFailure(driver_message(exc)) from exc
    except DBAPIError as exc:
        logger.warning("statement rejected: %s", driver_message(exc))
        raise StoreError(driver_message(exc)) from exc
