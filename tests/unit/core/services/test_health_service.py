"""Unit tests for HealthService."""

from sqlalchemy.exc import OperationalError

from jotter.core.services.health_service import HealthService


async def test_healthy_database(test_session):
    svc = HealthService(test_session)

    status = await svc.get_health_status()

    assert status.status == "healthy"
    assert status.checks["database"]["connected"] is True


async def test_unreachable_database_reported_unhealthy():
    class DownSession:
        async def execute(self, stmt):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    svc = HealthService(DownSession())

    db = await svc.check_database_health()
    status = await svc.get_health_status()

    assert db["connected"] is False
    assert "connection refused" in db["error"]
    assert status.status == "unhealthy"
