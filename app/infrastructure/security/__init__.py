"""Credential handling implementations."""
from app.infrastructure.security.password_hasher import WerkzeugPasswordHasher

__all__ = ["WerkzeugPasswordHasher"]
