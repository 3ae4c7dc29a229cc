"""Tests for the recurring entitlement check driver."""

from __future__ import annotations

import threading
from datetime import timedelta

import pytest

from app.config import get_settings
from app.infrastructure.scheduler import (
    ENTITLEMENT_JOB_ID,
    EntitlementScheduler,
    build_entitlement_scheduler,
)


def _scheduler(job, *, initial_delay=timedelta(hours=1)):
    return EntitlementScheduler(job, initial_delay=initial_delay, interval=timedelta(hours=24))


def test_first_run_happens_after_initial_delay():
    ran = threading.Event()
    scheduler = _scheduler(ran.set, initial_delay=timedelta(0))

    scheduler.start()
    try:
        assert ran.wait(timeout=5)
    finally:
        scheduler.stop()

    assert not scheduler.running


def test_nothing_runs_before_the_delay_expires():
    calls = []
    scheduler = _scheduler(lambda: calls.append(1))

    scheduler.start()
    try:
        assert scheduler.running
    finally:
        scheduler.stop()

    assert calls == []


def test_start_twice_keeps_a_single_scheduler():
    scheduler = _scheduler(lambda: None)

    scheduler.start()
    first = scheduler._scheduler
    scheduler.start()
    try:
        assert scheduler._scheduler is first
        assert first.get_job(ENTITLEMENT_JOB_ID) is not None
    finally:
        scheduler.stop()


def test_stop_without_start_is_harmless():
    _scheduler(lambda: None).stop()


def test_run_now_returns_the_job_result():
    assert _scheduler(lambda: "done").run_now() == "done"


def test_run_now_propagates_errors():
    def job():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        _scheduler(job).run_now()


def test_scheduled_run_is_skipped_while_another_is_in_progress():
    calls = []
    scheduler = _scheduler(lambda: calls.append(1))

    with scheduler._lock:
        scheduler._run_scheduled()

    assert calls == []
    scheduler._run_scheduled()
    assert calls == [1]


def test_scheduled_run_logs_and_swallows_errors(caplog):
    def job():
        raise RuntimeError("boom")

    scheduler = _scheduler(job)

    scheduler._run_scheduled()

    assert "Scheduled entitlement check failed" in caplog.text
    assert not scheduler._lock.locked()


def test_run_now_waits_for_the_running_pass():
    release = threading.Event()
    started = threading.Event()
    order = []

    def job():
        order.append("start")
        started.set()
        release.wait(timeout=5)
        order.append("end")
        return len(order)

    scheduler = _scheduler(job)
    worker = threading.Thread(target=scheduler._run_scheduled)
    worker.start()
    assert started.wait(timeout=5)

    result = {}
    waiter = threading.Thread(target=lambda: result.setdefault("value", scheduler.run_now()))
    waiter.start()
    release.set()
    worker.join(timeout=5)
    waiter.join(timeout=5)

    assert order == ["start", "end", "start", "end"]
    assert result["value"] == 4


def test_build_entitlement_scheduler_reads_settings():
    settings = get_settings().model_copy(
        update={"scheduler_initial_delay_seconds": 5, "scheduler_interval_hours": 12}
    )

    scheduler = build_entitlement_scheduler(settings, lambda: None)

    assert scheduler._initial_delay == timedelta(seconds=5)
    assert scheduler._interval == timedelta(hours=12)
