"""PostgreSQL permission repository implementation."""

from dataclasses import replace
from uuid import UUID

from psycopg import AsyncConnection

from rolegate.domain.entities import Permission
from rolegate.domain.value_objects import Action, OwnershipLevel, ResourceHierarchy

_COLUMNS = "id, role_id, service, ownership_level, action, resource_hierarchy, alias"


def _row_to_permission(r: tuple) -> Permission:
    return Permission(
        id=r[0],
        role_id=r[1],
        service=r[2],
        ownership_level=OwnershipLevel(r[3]),
        action=Action(r[4]),
        resource_hierarchy=ResourceHierarchy(r[5]),
        alias=r[6],
    )


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permissions WHERE id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_permission(r)

    async def list_by_role(self, role_id: UUID) -> list[Permission]:
        """List permissions granted to role."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permissions WHERE role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def list_for_service_account(self, service_account_id: UUID) -> list[Permission]:
        """List permissions of the service account's base role and bound roles."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permissions WHERE role_id IN ("
            "SELECT base_role_id FROM service_accounts WHERE id = %s "
            "UNION SELECT role_id FROM role_bindings WHERE service_account_id = %s)",
            (service_account_id, service_account_id),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def create(self, permission: Permission) -> Permission:
        """Create permission. An identical grant on the same role only updates its alias."""
        cur = await self._conn.execute(
            f"INSERT INTO permissions ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (role_id, service, ownership_level, action, resource_hierarchy) "
            "DO UPDATE SET alias = EXCLUDED.alias, updated_at = now() RETURNING id",
            (
                permission.id,
                permission.role_id,
                permission.service,
                permission.ownership_level.value,
                str(permission.action),
                str(permission.resource_hierarchy),
                permission.alias,
            ),
        )
        r = await cur.fetchone()
        return replace(permission, id=r[0])

    async def delete(self, permission_id: UUID) -> None:
        """Delete permission."""
        await self._conn.execute(
            "DELETE FROM permissions WHERE id = %s",
            (permission_id,),
        )
