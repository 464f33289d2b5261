"""Tests for the monthly reset process and its scheduler."""

import logging

from peercredit.core.database import Base
from peercredit.jobs import build_scheduler, execute_monthly_reset, run_reset_once
from peercredit.jobs.monthly_reset import JOB_ID
from peercredit.services.monthly_reset_service import reset_all_accounts


def test_reset_refills_allowance_with_capped_carry_over(database, make_account, balances):
    cases = {
        make_account(givable_balance=0, sent_this_cycle=100, received_balance=12): 100,
        make_account(givable_balance=30, sent_this_cycle=70): 130,
        make_account(givable_balance=50, sent_this_cycle=50): 150,
        make_account(givable_balance=80, sent_this_cycle=20, received_balance=3): 150,
        make_account(givable_balance=150, sent_this_cycle=0): 150,
    }
    received_before = {account_id: balances(account_id)[2] for account_id in cases}

    with database.unit_of_work() as session:
        updated = reset_all_accounts(session)

    assert updated == len(cases)
    for account_id, expected_givable in cases.items():
        givable, sent, received = balances(account_id)
        assert givable == expected_givable
        assert sent == 0
        assert received == received_before[account_id]


def test_running_reset_twice_reapplies_carry_over(database, make_account, balances):
    account = make_account(givable_balance=20, sent_this_cycle=80)

    run_reset_once(database)
    assert balances(account) == (120, 0, 0)

    run_reset_once(database)
    assert balances(account) == (150, 0, 0)


def test_run_reset_once_reports_summary(database, make_account):
    make_account()
    make_account()

    assert run_reset_once(database) == {"accounts_processed": 2}


def test_execute_monthly_reset_logs_failure_without_raising(database, caplog):
    Base.metadata.drop_all(database.engine)

    with caplog.at_level(logging.ERROR, logger="peercredit.jobs.monthly_reset"):
        assert execute_monthly_reset(database) is None

    assert "monthly credit reset failed" in caplog.text


def test_execute_monthly_reset_logs_success(database, make_account, caplog):
    make_account()

    with caplog.at_level(logging.INFO, logger="peercredit.jobs.monthly_reset"):
        summary = execute_monthly_reset(database)

    assert summary == {"accounts_processed": 1}
    assert "monthly credit reset completed" in caplog.text


def test_scheduler_registers_single_cron_job(database, settings):
    scheduler = build_scheduler(database, settings)

    job = scheduler.get_job(JOB_ID)
    assert job is not None
    assert job.max_instances == 1
    assert job.coalesce is True
    fields = {field.name: str(field) for field in job.trigger.fields}
    assert fields["day"] == "1"
    assert fields["hour"] == "0"
    assert fields["minute"] == "0"
