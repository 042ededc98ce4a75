"""Unit tests for the PostgreSQL adapters over a mocked pool and connection."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from rolegate.config import Settings
from rolegate.domain.entities import Permission
from rolegate.domain.exceptions import NotFound
from rolegate.domain.value_objects import OwnershipLevel
from rolegate.infrastructure.persistence.postgres import connection
from rolegate.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from rolegate.infrastructure.persistence.postgres.service_account_repository import (
    PostgresServiceAccountRepository,
)
from rolegate.infrastructure.persistence.postgres.unit_of_work import (
    PostgresUnitOfWork,
    create_uow_factory,
)


class _PooledConnection:
    """Stands in for AsyncConnectionPool.connection(); records every release."""

    def __init__(self, conn) -> None:
        self.conn = conn
        self.releases: list = []

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.releases.append(exc_type)
        return False


def _pool():
    conn = AsyncMock()
    pooled = _PooledConnection(conn)
    pool = MagicMock()
    pool.connection.return_value = pooled
    return pool, conn, pooled


def _cursor(rows=None, row=None) -> AsyncMock:
    cur = AsyncMock()
    cur.fetchall.return_value = rows or []
    cur.fetchone.return_value = row
    return cur


def _sa_row(email: str) -> tuple:
    return (uuid4(), email.split("@")[0], uuid4(), email, None, None)


# --- Unit of work ---


@pytest.mark.asyncio
async def test_unit_of_work_commits_on_clean_exit() -> None:
    pool, conn, pooled = _pool()

    async with create_uow_factory(pool)() as uow:
        assert isinstance(uow, PostgresUnitOfWork)

    conn.commit.assert_awaited_once()
    conn.rollback.assert_not_awaited()
    assert pooled.releases == [None]


@pytest.mark.asyncio
async def test_unit_of_work_rolls_back_once_on_error() -> None:
    pool, conn, pooled = _pool()

    with pytest.raises(RuntimeError, match="write failed"):
        async with create_uow_factory(pool)():
            raise RuntimeError("write failed")

    conn.rollback.assert_awaited_once()
    conn.commit.assert_not_awaited()
    assert pooled.releases == [RuntimeError]


@pytest.mark.asyncio
async def test_unit_of_work_releases_connection_when_commit_fails() -> None:
    pool, conn, pooled = _pool()
    conn.commit.side_effect = RuntimeError("commit failed")

    with pytest.raises(RuntimeError, match="commit failed"):
        async with create_uow_factory(pool)():
            pass

    assert len(pooled.releases) == 1


@pytest.mark.asyncio
async def test_unit_of_work_repositories_share_connection() -> None:
    pool, conn, _ = _pool()

    async with create_uow_factory(pool)() as uow:
        assert uow.permissions._conn is conn
        assert uow.service_accounts._conn is conn

    pool.connection.assert_called_once_with()


def test_factory_builds_fresh_units_of_work() -> None:
    pool, _, _ = _pool()
    factory = create_uow_factory(pool)
    assert factory() is not factory()


def test_create_pool_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    pool_cls = MagicMock()
    monkeypatch.setattr(connection, "AsyncConnectionPool", pool_cls)
    settings = Settings(
        _env_file=None,
        database_url="postgresql://db/rolegate",
        database_pool_min_size=1,
        database_pool_max_size=3,
    )

    connection.create_pool(settings)

    pool_cls.assert_called_once_with(
        conninfo="postgresql://db/rolegate", min_size=1, max_size=3, open=False
    )


# --- Service accounts ---


@pytest.mark.asyncio
async def test_for_emails_keeps_requested_order() -> None:
    conn = AsyncMock()
    a, b = _sa_row("a@x.com"), _sa_row("b@x.com")
    conn.execute.return_value = _cursor(rows=[a, b])

    accounts = await PostgresServiceAccountRepository(conn).for_emails(["b@x.com", "a@x.com"])

    assert [sa.email for sa in accounts] == ["b@x.com", "a@x.com"]
    assert accounts[0].base_role_id == b[2]


@pytest.mark.asyncio
async def test_for_emails_missing_email_raises_not_found() -> None:
    conn = AsyncMock()
    conn.execute.return_value = _cursor(rows=[_sa_row("a@x.com")])

    with pytest.raises(NotFound, match="b@x.com"):
        await PostgresServiceAccountRepository(conn).for_emails(["a@x.com", "b@x.com"])


@pytest.mark.asyncio
async def test_search_escapes_like_wildcards() -> None:
    conn = AsyncMock()
    conn.execute.return_value = _cursor(rows=[])

    await PostgresServiceAccountRepository(conn).search("50%_off")

    sql, params = conn.execute.call_args.args
    assert "ILIKE" in sql
    assert params == ("%50\\%\\_off%", "%50\\%\\_off%")


@pytest.mark.asyncio
async def test_list_all_maps_rows() -> None:
    conn = AsyncMock()
    row = _sa_row("a@x.com")
    conn.execute.return_value = _cursor(rows=[row])

    accounts = await PostgresServiceAccountRepository(conn).list_all()

    assert [(sa.id, sa.email) for sa in accounts] == [(row[0], "a@x.com")]
    assert "ORDER BY created_at DESC" in conn.execute.call_args.args[0]


# --- Permissions ---


@pytest.mark.asyncio
async def test_create_permission_uses_returned_id() -> None:
    conn = AsyncMock()
    stored_id = uuid4()
    conn.execute.return_value = _cursor(row=(stored_id,))
    permission = Permission.build("iam::RO::create::role::*").bound_to(uuid4(), uuid4())

    created = await PostgresPermissionRepository(conn).create(permission)

    assert created.id == stored_id
    _, params = conn.execute.call_args.args
    assert params[2:6] == ("iam", "RO", "create", "role::*")


@pytest.mark.asyncio
async def test_get_permission_maps_row() -> None:
    conn = AsyncMock()
    permission_id, role_id = uuid4(), uuid4()
    conn.execute.return_value = _cursor(
        row=(permission_id, role_id, "maestro", "RL", "deploy", "maestro::*", "Deploy")
    )

    permission = await PostgresPermissionRepository(conn).get_by_id(permission_id)

    assert permission.ownership_level is OwnershipLevel.LENDER
    assert str(permission) == "maestro::RL::deploy::maestro::*"
    assert (permission.role_id, permission.alias) == (role_id, "Deploy")


@pytest.mark.asyncio
async def test_get_permission_missing_returns_none() -> None:
    conn = AsyncMock()
    conn.execute.return_value = _cursor(row=None)

    assert await PostgresPermissionRepository(conn).get_by_id(uuid4()) is None
