"""Shopper accounts used by the mock login.

The cart and catalog engines never look at users; checkout only needs
to know whether somebody is logged in and who, for order attribution.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
