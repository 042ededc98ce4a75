"""PostgreSQL Unit of Work implementation."""

import logging
from functools import partial

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from rolegate.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from rolegate.infrastructure.persistence.postgres.service_account_repository import (
    PostgresServiceAccountRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """One pooled connection, one transaction.

    Leaving the block commits; an exception rolls back. The connection goes
    back to the pool once either way.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn_cm = None
        self._conn: AsyncConnection | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permissions = PostgresPermissionRepository(self._conn)
        self._service_accounts = PostgresServiceAccountRepository(self._conn)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is None:
                await self.commit()
            else:
                logger.warning("rolling back transaction: %r", exc_val)
                await self.rollback()
        finally:
            conn_cm, self._conn_cm, self._conn = self._conn_cm, None, None
            await conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def service_accounts(self) -> PostgresServiceAccountRepository:
        return self._service_accounts

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> partial:
    """Factory whose calls are `async with`-able PostgresUnitOfWork instances."""
    return partial(PostgresUnitOfWork, pool)
