"""Tests for the route transaction helper and the server entry point."""

from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

from peercredit import main
from peercredit.api.transactions import commit_or_raise
from peercredit.core.errors import InsufficientCredits


def test_commit_or_raise_commits_on_success():
    db = MagicMock(spec=Session)

    with commit_or_raise(db):
        pass

    db.commit.assert_called_once_with()
    db.rollback.assert_not_called()


def test_commit_or_raise_rolls_back_and_maps_ledger_errors():
    db = MagicMock(spec=Session)

    with pytest.raises(HTTPException) as excinfo:
        with commit_or_raise(db):
            raise InsufficientCredits("Insufficient credits: 10 available, 20 requested.")

    db.rollback.assert_called_once_with()
    db.commit.assert_not_called()
    assert excinfo.value.status_code == 500
    assert excinfo.value.detail == {
        "code": "INSUFFICIENT_CREDITS",
        "message": "Insufficient credits: 10 available, 20 requested.",
    }


def test_commit_or_raise_leaves_other_errors_alone():
    db = MagicMock(spec=Session)

    with pytest.raises(RuntimeError):
        with commit_or_raise(db):
            raise RuntimeError("boom")

    db.commit.assert_not_called()


def test_run_serves_app_with_uvicorn(monkeypatch, settings):
    served = {}

    def fake_run(app, **kwargs):
        served["app"] = app
        served.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)
    monkeypatch.setattr(main, "get_settings", lambda: settings.model_copy(update={"port": 9100}))

    main.run()

    assert served == {"app": main.app, "host": "0.0.0.0", "port": 9100}
