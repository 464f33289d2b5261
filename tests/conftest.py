"""Shared fixtures: a fresh file-backed SQLite database per test."""

import itertools

import pytest
from fastapi.testclient import TestClient

from peercredit.core.config import Settings
from peercredit.core.database import Database
from peercredit.main import create_app
from peercredit.models import Account


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'peercredit.db'}",
        scheduler_enabled=False,
    )


@pytest.fixture
def database(settings):
    db = Database.from_settings(settings)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def make_account(database):
    """Insert an account with explicit balances and return its id."""

    counter = itertools.count(1)

    def _make(*, givable_balance=100, sent_this_cycle=0, received_balance=0, name=None):
        n = next(counter)
        with database.unit_of_work() as session:
            account = Account(
                name=name or f"User {n}",
                email=f"user{n}@example.com",
                givable_balance=givable_balance,
                sent_this_cycle=sent_this_cycle,
                received_balance=received_balance,
            )
            session.add(account)
            session.flush()
            return account.id

    return _make


@pytest.fixture
def balances(database):
    """Read (givable, sent, received) for an account in a fresh session."""

    def _balances(account_id):
        with database.unit_of_work() as session:
            account = session.get(Account, account_id)
            return account.givable_balance, account.sent_this_cycle, account.received_balance

    return _balances


@pytest.fixture
def client(settings, database):
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client
