"""
Error taxonomy of the User Vault API.

Each failure kind is its own exception class so the HTTP layer can map
kinds to status codes without inspecting messages.

Hierarchy::

    UserVaultError (base)
    ├── ValidationError (bad name or date of birth)
    ├── NotFoundError   (referenced id does not exist)
    └── StoreError      (connectivity, constraint or unexpected store failure)
"""

from typing import Any, Dict, Optional


class UserVaultError(Exception):
    """Base class for all errors raised by the service and repositories."""

    code = "USER_VAULT_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error as a terse API payload."""
        return {"error": self.message}


class ValidationError(UserVaultError):
    """Inbound ``name`` or ``dob`` does not satisfy the validation rules.

    ``field`` is the wire name of the offending field (``"name"`` or
    ``"dob"``).  Callers can recover by resubmitting corrected input.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"invalid {field}")

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        return result


class NotFoundError(UserVaultError):
    """No user is stored under the requested id."""

    code = "NOT_FOUND"

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("user not found")


class StoreError(UserVaultError):
    """The relational store failed.

    The message is meant for logs.  ``to_dict`` returns a generic
    payload so driver details never reach API clients.
    """

    code = "STORE_ERROR"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": "internal server error"}
