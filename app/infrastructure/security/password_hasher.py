"""Salted password hashing backed by Werkzeug."""
from typing import Optional

from werkzeug.security import generate_password_hash, check_password_hash

from app.domain.interfaces.password_hasher import IPasswordHasher


class WerkzeugPasswordHasher(IPasswordHasher):
    """Password hasher using ``werkzeug.security`` (salted, one-way)."""
    
    def __init__(self, method: Optional[str] = None):
        """
        Args:
            method: Werkzeug hash method (e.g. ``"scrypt"``, ``"pbkdf2:sha256"``);
                None uses Werkzeug's default
        """
        self.method = method
    
    def hash(self, password: str) -> str:
        if self.method:
            return generate_password_hash(password, method=self.method)
        return generate_password_hash(password)
    
    def verify(self, password_hash: str, password: str) -> bool:
        return check_password_hash(password_hash, password)
