"""Tests for the endorsement register."""

import pytest
from sqlalchemy import func, select

from peercredit.core.errors import DuplicateEndorsement
from peercredit.models import Endorsement
from peercredit.services import endorsement_service, transfer_service


@pytest.fixture
def recognition(database, make_account):
    sender = make_account()
    recipient = make_account()
    with database.unit_of_work() as session:
        created = transfer_service.transfer(session, sender_id=sender, recipient_id=recipient, amount=10)
        return {"id": created.id, "sender_id": sender, "recipient_id": recipient}


@pytest.fixture
def recognition_id(recognition):
    return recognition["id"]


def _endorsement_count(database) -> int:
    with database.unit_of_work() as session:
        return session.execute(select(func.count(Endorsement.id))).scalar_one()


def test_endorse_creates_row(database, make_account, recognition_id):
    user = make_account()

    with database.unit_of_work() as session:
        endorsement = endorsement_service.endorse(session, user_id=user, recognition_id=recognition_id)
        assert endorsement.id is not None
        assert endorsement.user_id == user
        assert endorsement.recognition_id == recognition_id

    assert _endorsement_count(database) == 1


def test_second_endorsement_of_same_pair_is_rejected(database, make_account, recognition_id):
    user = make_account()

    with database.unit_of_work() as session:
        endorsement_service.endorse(session, user_id=user, recognition_id=recognition_id)

    with pytest.raises(DuplicateEndorsement):
        with database.unit_of_work() as session:
            endorsement_service.endorse(session, user_id=user, recognition_id=recognition_id)

    assert _endorsement_count(database) == 1


def test_different_users_may_endorse_the_same_recognition(database, make_account, recognition_id):
    first = make_account()
    second = make_account()

    with database.unit_of_work() as session:
        endorsement_service.endorse(session, user_id=first, recognition_id=recognition_id)
        endorsement_service.endorse(session, user_id=second, recognition_id=recognition_id)

    with database.unit_of_work() as session:
        listed = endorsement_service.list_endorsements(session, recognition_id=recognition_id)
        assert sorted(e.user_id for e in listed) == sorted([first, second])


def test_recipient_may_endorse_their_own_recognition(database, recognition):
    with database.unit_of_work() as session:
        endorsement_service.endorse(
            session, user_id=recognition["recipient_id"], recognition_id=recognition["id"]
        )

    assert _endorsement_count(database) == 1


def test_endorsing_does_not_touch_balances(database, make_account, balances, recognition_id):
    user = make_account(givable_balance=42, received_balance=9)

    with database.unit_of_work() as session:
        endorsement_service.endorse(session, user_id=user, recognition_id=recognition_id)

    assert balances(user) == (42, 0, 9)
