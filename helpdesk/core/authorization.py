# helpdesk/core/authorization.py
"""
Role + ownership policy shared by every resource type.

Rules, first match wins:
  1. Admin may perform any action on any resource.
  2. A Student may create/read/update/delete a resource it owns.
  3. Everything else is denied.

``Action.MODERATE`` (changing a ticket's status or type) is only granted by
rule 1. A ``Resource`` without owner stands for an admin-only collection.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from helpdesk.core.exceptions import ForbiddenError
from helpdesk.entities.user import AuthContext, Role


class Action(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MODERATE = "moderate"


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True)
class Resource:
    owner_id: int | None = None


ADMIN_ONLY = Resource(owner_id=None)

_OWNER_ACTIONS = frozenset({Action.CREATE, Action.READ, Action.UPDATE, Action.DELETE})


def decide(caller: AuthContext, resource: Resource, action: Action) -> Decision:
    if caller.role is Role.ADMIN:
        return Decision.ALLOW

    if (
        caller.role is Role.STUDENT
        and resource.owner_id is not None
        and caller.subject_id == resource.owner_id
        and action in _OWNER_ACTIONS
    ):
        return Decision.ALLOW

    return Decision.DENY


def authorize(caller: AuthContext, resource: Resource, action: Action) -> None:
    if decide(caller, resource, action) is Decision.DENY:
        raise ForbiddenError("Access denied.")
