# helpdesk/entities/user.py
from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    STUDENT = "Student"
    ADMIN = "Admin"


@dataclass(frozen=True)
class AuthContext:
    """Typed claims of a validated access token, passed explicitly to services."""

    subject_id: int
    role: Role
