"""Domain Exceptions - Registration errors"""
from typing import Optional


class RegistrationError(Exception):
    """Base class for registration errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RegistrationValidationError(RegistrationError):
    """Submitted field is missing, mistyped, padded or out of range"""

    code = 422
    reason = "Validation error"

    def __init__(self, message: str, location: str):
        super().__init__(message)
        self.location = location

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "reason": self.reason,
            "message": self.message,
            "location": self.location,
        }


class UserAlreadyExistsError(RegistrationError):
    """Username is already taken"""

    status = 400

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"status": self.status, "message": self.message}


class DuplicateKeyError(Exception):
    """Raised by a user store when a unique key already exists"""

    def __init__(self, key: str, value: Optional[str] = None):
        super().__init__(f"Duplicate key {key}={value!r}")
        self.key = key
        self.value = value
