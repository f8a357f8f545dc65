"""
Scheduler wiring, sync handlers for row-locking routes, security helpers and health check
"""
import inspect
from datetime import timedelta

import pytest
from fastapi.routing import APIRoute

from app.core.security import create_access_token, decode_access_token
from app.db.models import User, UserRole
from app.db.session import seed_default_admin
from app.core.config import settings
from app.main import app
from app.utils import tasks


def test_scheduler_disabled_by_setting(monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_SCHEDULER", False)

    assert tasks.start_scheduler() is None


def test_scheduler_registers_reconciliation_job(monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_SCHEDULER", True)
    monkeypatch.setattr(settings, "RECONCILIATION_CRON", "*/15 * * * *")

    scheduler = tasks.start_scheduler()
    try:
        assert scheduler.running
        assert tasks.start_scheduler() is scheduler
        job = scheduler.get_job(tasks.RECONCILIATION_JOB_ID)
        assert job is not None
        assert job.func is tasks.reconcile_reservations_job
        assert job.max_instances == 1
    finally:
        tasks.shutdown_scheduler()


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-1))

    assert decode_access_token(token) is None
    assert decode_access_token(create_access_token({"sub": "1"}))["sub"] == "1"


def test_default_admin_is_seeded_once(db):
    seed_default_admin(db)
    seed_default_admin(db)

    admins = db.query(User).filter(User.username == settings.DEFAULT_ADMIN_USERNAME).all()
    assert len(admins) == 1
    assert admins[0].role == UserRole.ADMIN


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.parametrize("path, method", [
    ("/api/reservations/{reservation_id}/approve", "PATCH"),
    ("/api/reservations/{reservation_id}/reject", "PATCH"),
    ("/api/cars/{car_id}", "PUT"),
    ("/api/cars/{car_id}", "DELETE"),
])
def test_row_locking_routes_run_in_the_threadpool(path, method):
    # A blocking row lock must not hold up the event loop
    endpoint = next(
        route.endpoint for route in app.routes
        if isinstance(route, APIRoute) and route.path == path and method in route.methods
    )

    assert not inspect.iscoroutinefunction(endpoint)
