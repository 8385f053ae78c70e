from typing import Optional, Dict, Any


class HouseholdException(Exception):
    """Base exception for the household expenses backend."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(HouseholdException):
    """Raised when a requested resource is not found."""

    pass


class DuplicateResourceError(HouseholdException):
    """Raised when a write would violate a uniqueness rule (e.g. category name)."""

    pass


class SnapshotError(HouseholdException):
    """Raised when a historical snapshot could not be written."""

    pass
