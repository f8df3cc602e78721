# File: src/medical_gas_engineering/core/errors.py
"""
Exception types raised by the medical gas engineering engine.

Only invalid input and invalid configuration are errors. Unmodeled room
types and pipe runs that cannot meet their velocity ceiling are resolved by
documented fallbacks and reported as warnings instead.
"""

from typing import Optional, Dict, Any


class MedicalGasEngineeringError(Exception):
    """
    Base class for engine exceptions.

    Carries a human-readable detail message, an optional internal code for
    callers that map errors to their own responses, and extra context.
    """
    def __init__(
        self,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the error with details.

        Args:
            detail: Human-readable error message
            internal_code: Optional internal error code for client reference
            extra: Optional additional error context
        """
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a dictionary suitable for an error response.

        Returns:
            Dictionary with detail, and code/extra when present
        """
        error_response: Dict[str, Any] = {
            "detail": self.detail,
        }

        if self.internal_code:
            error_response["code"] = self.internal_code

        if self.extra:
            error_response["extra"] = self.extra

        return error_response


class InvalidInputError(MedicalGasEngineeringError):
    """Error raised for room, outlet or pipe parameters that fail validation."""
    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        room_id: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize with validation details.

        Args:
            detail: Validation error details
            field: Optional name of the field that failed validation
            room_id: Optional ID of the offending room
            extra: Optional additional context
        """
        extra = dict(extra or {})
        if field:
            extra["field"] = field
        if room_id is not None:
            extra["room_id"] = room_id
            detail = f"Room '{room_id}': {detail}"
        self.field = field
        self.room_id = room_id
        super().__init__(
            detail=detail,
            internal_code="invalid_input",
            extra=extra
        )


class ConfigurationError(MedicalGasEngineeringError):
    """Error raised when a configuration table is missing a required entry."""
    def __init__(
        self,
        detail: str,
        extra: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            detail=detail,
            internal_code="configuration_error",
            extra=extra
        )
