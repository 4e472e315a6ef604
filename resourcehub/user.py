"""The user model, roles and permissions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Mapping


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class UserRole(str, Enum):
    """Roles, from full access to minimal access."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"
    READ_ONLY = "readonly"
    GUEST = "guest"

    def __str__(self) -> str:
        return self.value


_BUILTIN_VARIANTS = {
    "create_resource": "CreateResource",
    "read_resource": "ReadResource",
    "update_resource": "UpdateResource",
    "delete_resource": "DeleteResource",
    "manage_users": "ManageUsers",
    "manage_settings": "ManageSettings",
    "view_reports": "ViewReports",
    "export_data": "ExportData",
    "import_data": "ImportData",
}
_BUILTIN_BY_VARIANT = {variant: name for name, variant in _BUILTIN_VARIANTS.items()}


@dataclass(frozen=True)
class Permission:
    """A built-in permission, or a custom one made with :meth:`custom`."""

    name: str
    is_custom: bool = False

    CREATE_RESOURCE: ClassVar[Permission]
    READ_RESOURCE: ClassVar[Permission]
    UPDATE_RESOURCE: ClassVar[Permission]
    DELETE_RESOURCE: ClassVar[Permission]
    MANAGE_USERS: ClassVar[Permission]
    MANAGE_SETTINGS: ClassVar[Permission]
    VIEW_REPORTS: ClassVar[Permission]
    EXPORT_DATA: ClassVar[Permission]
    IMPORT_DATA: ClassVar[Permission]

    def __post_init__(self) -> None:
        if not self.is_custom and self.name not in _BUILTIN_VARIANTS:
            raise ValueError(f"unknown permission: {self.name!r}")

    @classmethod
    def custom(cls, name: str) -> Permission:
        return cls(name, is_custom=True)

    def __str__(self) -> str:
        return f"custom:{self.name}" if self.is_custom else self.name


Permission.CREATE_RESOURCE = Permission("create_resource")
Permission.READ_RESOURCE = Permission("read_resource")
Permission.UPDATE_RESOURCE = Permission("update_resource")
Permission.DELETE_RESOURCE = Permission("delete_resource")
Permission.MANAGE_USERS = Permission("manage_users")
Permission.MANAGE_SETTINGS = Permission("manage_settings")
Permission.VIEW_REPORTS = Permission("view_reports")
Permission.EXPORT_DATA = Permission("export_data")
Permission.IMPORT_DATA = Permission("import_data")

_BASIC = frozenset(
    {
        Permission.CREATE_RESOURCE,
        Permission.READ_RESOURCE,
        Permission.UPDATE_RESOURCE,
        Permission.DELETE_RESOURCE,
    }
)
_MANAGER = _BASIC | {Permission.VIEW_REPORTS, Permission.EXPORT_DATA, Permission.IMPORT_DATA}
_ADMIN = _MANAGER | {Permission.MANAGE_USERS, Permission.MANAGE_SETTINGS}
_READ = frozenset({Permission.READ_RESOURCE})

_ROLE_PERMISSIONS: dict[UserRole, frozenset[Permission]] = {
    UserRole.ADMIN: _ADMIN,
    UserRole.MANAGER: _MANAGER,
    UserRole.USER: _BASIC,
    UserRole.READ_ONLY: _READ,
    UserRole.GUEST: _READ,
}


def _permission_to_wire(permission: Permission) -> Any:
    if permission.is_custom:
        return {"Custom": permission.name}
    return _BUILTIN_VARIANTS[permission.name]


def _permission_from_wire(value: Any) -> Permission:
    if isinstance(value, str) and value in _BUILTIN_BY_VARIANT:
        return Permission(_BUILTIN_BY_VARIANT[value])
    if isinstance(value, Mapping) and set(value) == {"Custom"}:
        return Permission.custom(str(value["Custom"]))
    raise ValueError(f"invalid permission: {value!r}")


@dataclass
class User:
    """A user account. The ``with_*`` methods return a modified copy."""

    id: str
    email: str
    name: str
    role: UserRole = UserRole.USER
    permissions: set[Permission] = field(default_factory=set)
    enabled: bool = True
    email_verified: bool = False
    created_at: str = field(default_factory=_now)
    last_login: str | None = None

    def __post_init__(self) -> None:
        self.role = UserRole(self.role)

    def with_role(self, role: UserRole) -> User:
        return replace(self, role=UserRole(role), permissions=set(self.permissions))

    def with_permission(self, permission: Permission) -> User:
        return replace(self, permissions=self.permissions | {permission})

    def with_email_verified(self, verified: bool) -> User:
        return replace(self, email_verified=verified, permissions=set(self.permissions))

    def record_login(self) -> None:
        """Set ``last_login`` to now."""
        self.last_login = _now()

    def has_permission(self, permission: Permission) -> bool:
        """Admins hold every permission; others only those granted explicitly."""
        return self.role is UserRole.ADMIN or permission in self.permissions

    def all_permissions(self) -> set[Permission]:
        """Explicit permissions together with those the role grants."""
        return set(self.permissions) | _ROLE_PERMISSIONS[self.role]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "permissions": [
                _permission_to_wire(p) for p in sorted(self.permissions, key=str)
            ],
            "enabled": self.enabled,
            "email_verified": self.email_verified,
            "created_at": self.created_at,
            "last_login": self.last_login,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> User:
        """Build from the JSON form; raises ValueError if it is malformed."""
        try:
            return cls(
                id=str(payload["id"]),
                email=str(payload["email"]),
                name=str(payload["name"]),
                role=UserRole(payload["role"]),
                permissions={_permission_from_wire(p) for p in payload["permissions"]},
                enabled=bool(payload["enabled"]),
                email_verified=bool(payload["email_verified"]),
                created_at=str(payload["created_at"]),
                last_login=payload.get("last_login"),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid user: {exc}") from exc