"""PostgreSQL service account repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolegate.domain.entities import ServiceAccount
from rolegate.domain.exceptions import NotFound

_COLUMNS = "id, name, base_role_id, email, key_id, key_secret"


def _row_to_service_account(r: tuple) -> ServiceAccount:
    return ServiceAccount(
        id=r[0],
        name=r[1],
        base_role_id=r[2],
        email=r[3],
        key_id=r[4],
        key_secret=r[5],
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresServiceAccountRepository:
    """Service account repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, service_account_id: UUID) -> ServiceAccount | None:
        """Get service account by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM service_accounts WHERE id = %s",
            (service_account_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_service_account(r)

    async def list_all(self) -> list[ServiceAccount]:
        """List service accounts, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM service_accounts ORDER BY created_at DESC"
        )
        return [_row_to_service_account(r) for r in await cur.fetchall()]

    async def search(self, term: str) -> list[ServiceAccount]:
        """Case-insensitive substring match on name or email, newest first."""
        pattern = f"%{_escape_like(term)}%"
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM service_accounts "
            "WHERE name ILIKE %s OR email ILIKE %s ORDER BY created_at DESC",
            (pattern, pattern),
        )
        return [_row_to_service_account(r) for r in await cur.fetchall()]

    async def for_email(self, email: str) -> ServiceAccount | None:
        """Get service account by email."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM service_accounts WHERE email = %s LIMIT 1",
            (email,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_service_account(r)

    async def for_emails(self, emails: list[str]) -> list[ServiceAccount]:
        """Get service accounts for every email, in the order given."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM service_accounts WHERE email = ANY(%s)",
            (emails,),
        )
        by_email = {r[3]: _row_to_service_account(r) for r in await cur.fetchall()}
        accounts = []
        for email in emails:
            if email not in by_email:
                raise NotFound("ServiceAccount", email)
            accounts.append(by_email[email])
        return accounts
