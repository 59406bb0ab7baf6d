"""Shared dependencies for the HTTP layer."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from ..core.config import Settings
from ..services.errors import StoreError, translate_store_errors


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


@contextmanager
def committing(db: Session) -> Iterator[None]:
    """Commit the session after the block, rolling back on any store error."""

    try:
        yield
        with translate_store_errors():
            db.commit()
    except StoreError:
        db.rollback()
        raise
