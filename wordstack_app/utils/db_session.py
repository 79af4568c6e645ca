"""Utility helpers for working with the SQLAlchemy session.

:func:`transaction` scopes a unit of work: everything done inside the block is
committed together, and any exception rolls the whole block back before it
propagates.

Writes take the SQLite lock at flush time, inside the block, so a short lock
is waited out by the connection's ``busy_timeout`` (see
``core/extensions.py``).  A lock that outlasts it surfaces as an
``OperationalError`` and the block is rolled back.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm.session import Session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit the block on success, roll it back on any exception."""

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
