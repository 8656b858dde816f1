# accounts/roles.py
"""
Authorization gate: a fixed decision table keyed by (role, action).

``None`` stands for an anonymous caller. A deny is a normal answer, not an
error; ``require`` is the helper that turns it into AuthenticationAbsent or
AuthorizationDenied for callers that want to stop on it.
"""
from enum import Enum

from core.core_models import Role
from core.exceptions import AuthenticationAbsent, AuthorizationDenied

ANONYMOUS = None


class Action(str, Enum):
    CREATE_POST = "create post"
    READ_POST = "read post"
    VIEW_CONTRIBUTOR_AREA = "view contributor area"
    VIEW_ADMIN_AREA = "view admin area"


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


# Any caller, signed in or not
EVERYONE = object()

PERMISSIONS = {
    Action.CREATE_POST: frozenset({Role.CONTRIBUTOR.value, Role.ADMIN.value}),
    Action.READ_POST: EVERYONE,
    Action.VIEW_CONTRIBUTOR_AREA: frozenset({Role.CONTRIBUTOR.value, Role.ADMIN.value}),
    Action.VIEW_ADMIN_AREA: frozenset({Role.ADMIN.value}),
}


def _role_value(role):
    if role is ANONYMOUS:
        return ANONYMOUS
    return role.value if isinstance(role, Role) else str(role)


def authorize(role, action: Action) -> Decision:
    allowed = PERMISSIONS.get(Action(action), frozenset())
    if allowed is EVERYONE:
        return Decision.ALLOW
    return Decision.ALLOW if _role_value(role) in allowed else Decision.DENY


def require(identity, action: Action) -> None:
    """Raise unless ``identity`` (an accounts.session.Identity or None) may perform ``action``."""
    role = identity.role if identity is not None else ANONYMOUS
    if authorize(role, action) is Decision.ALLOW:
        return
    if identity is None:
        raise AuthenticationAbsent(f"Sign in required to {Action(action).value}")
    raise AuthorizationDenied(role, Action(action).value)


def home_path_for(role) -> str:
    """Landing page after sign-in for each role."""
    return {
        Role.ADMIN.value: "/admin-panel/",
        Role.CONTRIBUTOR.value: "/contributor/",
    }.get(_role_value(role), "/")
