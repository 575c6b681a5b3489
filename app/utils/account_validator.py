"""Registration input validation utilities."""
import re
from typing import Dict

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class AccountValidator:
    """Utility class for validating registration fields."""
    
    @staticmethod
    def validate_email(email: str) -> bool:
        """
        Validate email format.
        
        Args:
            email: Email to validate
            
        Returns:
            True if valid, False otherwise
        """
        return bool(email) and _EMAIL_PATTERN.match(email) is not None
    
    @staticmethod
    def registration_errors(
        name: str,
        email: str,
        password: str,
        min_name_length: int = 2,
        min_password_length: int = 6,
    ) -> Dict[str, str]:
        """
        Collect field errors for a registration request.
        
        Returns:
            Mapping of field name to message; empty when the input is valid
        """
        errors = {}
        if not name or len(name.strip()) < min_name_length:
            errors["name"] = f"Name must be at least {min_name_length} characters long"
        if not AccountValidator.validate_email(email):
            errors["email"] = "Please enter a valid email address"
        if not password or len(password) < min_password_length:
            errors["password"] = f"Password must be at least {min_password_length} characters long"
        return errors
