"""
Custom exceptions for the Lift Progress engine.

Concrete record stores raise these when a remote fetch fails; the public
accessors of the progress service absorb them and degrade to empty results.
Each exception includes:
- A descriptive message
- An error code for API responses
- HTTP status code mapping
- Optional details for debugging
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Progress errors
    EXERCISE_NOT_FOUND = "EXERCISE_NOT_FOUND"

    # Collaborator errors
    RECORD_SOURCE_ERROR = "RECORD_SOURCE_ERROR"
    CATALOG_ERROR = "CATALOG_ERROR"
    PR_TRACKER_ERROR = "PR_TRACKER_ERROR"


class ProgressError(Exception):
    """
    Base exception for all Lift Progress errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        status_code: HTTP status code for API responses
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Not Found Errors (404)
# ============================================================================

class NotFoundError(ProgressError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        message = f"{resource_type} with ID '{resource_id}' not found"
        error_details = details or {}
        error_details["resource_type"] = resource_type
        error_details["resource_id"] = resource_id
        super().__init__(
            message=message,
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details=error_details,
        )


class ExerciseNotFoundError(NotFoundError):
    """Raised when no progress series exists for an exercise key."""

    def __init__(self, key: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            resource_type="Exercise",
            resource_id=key,
            details=details,
        )
        self.code = ErrorCode.EXERCISE_NOT_FOUND


# ============================================================================
# Collaborator Errors (502)
# ============================================================================

class RecordSourceError(ProgressError):
    """Raised when workout records cannot be fetched."""

    def __init__(
        self,
        message: str,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if user_id:
            error_details["user_id"] = user_id
        super().__init__(
            message=message,
            code=ErrorCode.RECORD_SOURCE_ERROR,
            status_code=502,
            details=error_details,
        )


class CatalogError(ProgressError):
    """Raised when the exercise catalog cannot be loaded."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CATALOG_ERROR,
            status_code=502,
            details=details,
        )


class PRTrackerError(ProgressError):
    """Raised when personal records cannot be loaded."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.PR_TRACKER_ERROR,
            status_code=502,
            details=details,
        )
