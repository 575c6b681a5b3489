"""Account directory entities."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Account:
    """Stored account record. ``password_hash`` never leaves the directory."""

    account_id: str
    name: str
    email: str
    password_hash: str

    def public_view(self) -> "PublicAccount":
        return PublicAccount(account_id=self.account_id, name=self.name, email=self.email)


@dataclass(frozen=True)
class PublicAccount:
    """Account as returned to callers (no credentials)."""

    account_id: str
    name: str
    email: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.account_id, "name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PublicAccount":
        return cls(account_id=str(data["id"]), name=data["name"], email=data["email"])


@dataclass(frozen=True)
class AuthResult:
    """Result of a successful register or login."""

    token: str
    user: PublicAccount
