"""Application entry point and composition root."""

import argparse
import sys
from dataclasses import dataclass

from rolegate import __version__
from rolegate.application.use_cases.permission.attribute_permissions import (
    AttributePermissionsUseCase,
)
from rolegate.application.use_cases.permission.attribute_permissions_to_emails import (
    AttributePermissionsToEmailsUseCase,
)
from rolegate.application.use_cases.permission.create_permission import CreatePermissionUseCase
from rolegate.application.use_cases.permission.delete_permission import DeletePermissionUseCase
from rolegate.application.use_cases.permission.get_permission import GetPermissionUseCase
from rolegate.application.use_cases.service_account.list_service_accounts import (
    ListServiceAccountsUseCase,
)
from rolegate.config import Settings, get_settings
from rolegate.domain.entities import Permission, build_permissions, validate_permission
from rolegate.domain.exceptions import ValidationError
from rolegate.domain.value_objects import ResourceHierarchy
from rolegate.infrastructure.permission.permission_checker import RoleGatePermissionChecker
from rolegate.infrastructure.persistence.postgres.connection import create_pool
from rolegate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from rolegate.logging_config import configure_logging


@dataclass
class UseCases:
    """Wired use cases for a transport layer to call."""

    get_permission: GetPermissionUseCase
    create_permission: CreatePermissionUseCase
    delete_permission: DeletePermissionUseCase
    attribute_permissions: AttributePermissionsUseCase
    attribute_permissions_to_emails: AttributePermissionsToEmailsUseCase
    list_service_accounts: ListServiceAccountsUseCase
    permission_checker: RoleGatePermissionChecker


def build_use_cases(uow_factory, app_name: str) -> UseCases:
    """Build every use case over one unit of work factory.

    app_name is the service of the permissions guarding RoleGate's own operations.
    """
    permission_checker = RoleGatePermissionChecker(uow_factory)
    return UseCases(
        get_permission=GetPermissionUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=permission_checker,
            app_name=app_name,
        ),
        create_permission=CreatePermissionUseCase(unit_of_work_factory=uow_factory),
        delete_permission=DeletePermissionUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=permission_checker,
            app_name=app_name,
        ),
        attribute_permissions=AttributePermissionsUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=permission_checker,
        ),
        attribute_permissions_to_emails=AttributePermissionsToEmailsUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=permission_checker,
        ),
        list_service_accounts=ListServiceAccountsUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=permission_checker,
            app_name=app_name,
        ),
        permission_checker=permission_checker,
    )


def create_rolegate(settings: Settings | None = None):
    """Composition root - returns the (unopened) pool and wired use cases."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    pool = create_pool(settings)
    return pool, build_use_cases(create_uow_factory(pool), settings.app_name)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rolegate", description="RoleGate permission tools")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("version", help="Print version")

    validate = sub.add_parser("validate", help="Validate permission strings")
    validate.add_argument("permissions", nargs="+")

    matches = sub.add_parser("matches", help="List hierarchies that match a resource")
    matches.add_argument("resource_hierarchy")

    check = sub.add_parser("check", help="Check a permission against held permissions")
    check.add_argument("permission")
    check.add_argument("--held", nargs="+", required=True, help="Held permission strings")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)

    if args.command == "version":
        print(f"RoleGate v{__version__}")
        return 0

    if args.command == "matches":
        for match in ResourceHierarchy(args.resource_hierarchy).permission_matches():
            print(match)
        return 0

    try:
        if args.command == "validate":
            for permission in args.permissions:
                validate_permission(permission)
                print(f"ok {permission}")
            return 0

        candidate = Permission.build(args.permission)
        held = build_permissions(args.held)
    except ValidationError as e:
        print(f"invalid: {e}", file=sys.stderr)
        return 1

    present = candidate.is_present(held)
    print("present" if present else "absent")
    return 0 if present else 2


if __name__ == "__main__":
    sys.exit(main())
