"""Pytest fixtures for RoleGate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from uuid import UUID, uuid4

import pytest

from rolegate.domain.entities import Permission, ServiceAccount
from rolegate.domain.exceptions import NotFound


class FakeStore:
    """Committed state shared by every unit of work of a test."""

    def __init__(self) -> None:
        self.permissions: dict[UUID, Permission] = {}
        self.service_accounts: dict[UUID, ServiceAccount] = {}
        self.role_bindings: dict[UUID, set[UUID]] = {}  # service_account_id -> {role_id}
        self.create_calls = 0
        self.fail_on_create_call: int | None = None

    def add_service_account(self, sa: ServiceAccount) -> None:
        """Helper to add service account for tests."""
        self.service_accounts[sa.id] = sa

    def bind_role(self, service_account_id: UUID, role_id: UUID) -> None:
        """Helper to bind an extra role to a service account."""
        self.role_bindings.setdefault(service_account_id, set()).add(role_id)

    def grant(self, role_id: UUID, *permissions: str) -> None:
        """Helper to store committed permissions for role."""
        for p in permissions:
            perm = Permission.build(p).bound_to(role_id, uuid4())
            self.permissions[perm.id] = perm


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission repository; writes are staged until commit."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store
        self._pending: dict[UUID, Permission] = {}
        self._deleted: set[UUID] = set()

    def _visible(self) -> list[Permission]:
        merged = {**self._store.permissions, **self._pending}
        return [p for pid, p in merged.items() if pid not in self._deleted]

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        for p in self._visible():
            if p.id == permission_id:
                return p
        return None

    async def list_by_role(self, role_id: UUID) -> list[Permission]:
        return [p for p in self._visible() if p.role_id == role_id]

    async def list_for_service_account(self, service_account_id: UUID) -> list[Permission]:
        sa = self._store.service_accounts.get(service_account_id)
        if not sa:
            return []
        role_ids = {sa.base_role_id} | self._store.role_bindings.get(service_account_id, set())
        return [p for p in self._visible() if p.role_id in role_ids]

    async def create(self, permission: Permission) -> Permission:
        self._store.create_calls += 1
        if self._store.create_calls == self._store.fail_on_create_call:
            raise RuntimeError("write failed")
        self._pending[permission.id] = permission
        return permission

    async def delete(self, permission_id: UUID) -> None:
        self._deleted.add(permission_id)

    def commit(self) -> None:
        self._store.permissions.update(self._pending)
        for pid in self._deleted:
            self._store.permissions.pop(pid, None)
        self.rollback()

    def rollback(self) -> None:
        self._pending = {}
        self._deleted = set()


class FakeServiceAccountRepository:
    """In-memory service account repository."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def get_by_id(self, service_account_id: UUID) -> ServiceAccount | None:
        return self._store.service_accounts.get(service_account_id)

    async def list_all(self) -> list[ServiceAccount]:
        return list(reversed(self._store.service_accounts.values()))

    async def search(self, term: str) -> list[ServiceAccount]:
        term = term.lower()
        return [
            sa
            for sa in await self.list_all()
            if term in sa.name.lower() or term in (sa.email or "").lower()
        ]

    async def for_email(self, email: str) -> ServiceAccount | None:
        for sa in self._store.service_accounts.values():
            if sa.email == email:
                return sa
        return None

    async def for_emails(self, emails: list[str]) -> list[ServiceAccount]:
        accounts = []
        for email in emails:
            sa = await self.for_email(email)
            if not sa:
                raise NotFound("ServiceAccount", email)
            accounts.append(sa)
        return accounts


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self, store: FakeStore) -> None:
        self.permissions = FakePermissionRepository(store)
        self.service_accounts = FakeServiceAccountRepository(store)
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.permissions.commit()
        self.committed = True

    async def rollback(self) -> None:
        self.permissions.rollback()
        self.rolled_back = True


def make_uow_factory(store: FakeStore) -> Callable:
    """Factory committing on success and rolling back on error, like the Postgres one."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        uow = FakeUnitOfWork(store)
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return _factory


# --- Fixtures ---


@pytest.fixture
def store() -> FakeStore:
    """Fresh in-memory store for each test."""
    return FakeStore()


@pytest.fixture
def uow_factory(store: FakeStore):
    """Factory returning async context manager with FakeUnitOfWork over store."""
    return make_uow_factory(store)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - every permission held by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    mock.missing.return_value = []
    return mock
