"""Database Session Manager: error mapping and readiness."""

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from team_balancer.core.errors import DatabaseError
from team_balancer.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_operational_error_mapped(manager):
    cause = OperationalError("SELECT 1", {}, Exception("gone"))
    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise cause
    assert exc.value.operation == "execute"
    assert exc.value.__cause__ is cause


async def test_generic_sqlalchemy_error_mapped(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise SQLAlchemyError("weird")
    assert exc.value.operation == "unknown"


async def test_non_database_errors_pass_through(manager):
    with pytest.raises(KeyError):
        async with manager.session():
            raise KeyError("x")
