"""Tests for the transaction helper."""

import pytest
from sqlalchemy.exc import IntegrityError

from wordstack_app import db
from wordstack_app.models import Word
from wordstack_app.utils.db_session import transaction


def test_commits_on_success(app):
    with transaction(db.session):
        db.session.add(Word(text='sun'))

    db.session.expunge_all()
    assert Word.query.filter_by(text='sun').count() == 1


def test_rolls_back_and_reraises(app):
    with pytest.raises(RuntimeError):
        with transaction(db.session):
            db.session.add(Word(text='moon'))
            db.session.flush()
            raise RuntimeError('boom')

    assert Word.query.filter_by(text='moon').count() == 0


def test_failed_flush_leaves_session_usable(app):
    with transaction(db.session):
        db.session.add(Word(text='star'))

    with pytest.raises(IntegrityError):
        with transaction(db.session):
            db.session.add(Word(text='star'))

    # The rollback above lets the next unit of work commit normally.
    with transaction(db.session):
        db.session.add(Word(text='comet'))

    assert Word.query.count() == 2
