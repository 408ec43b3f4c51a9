"""
PhotoGrid - Custom Exceptions Module

This module defines custom exception classes for specific error cases
in the PhotoGrid application.

A pointer that lands on empty space is normal control flow and never
raises; these exceptions cover broken contracts and bad settings.
"""


class PhotoGridError(Exception):
    """Base exception for all PhotoGrid errors.

    All custom exceptions should inherit from this class to allow
    catching any PhotoGrid-specific error.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class DragContractError(PhotoGridError):
    """Raised when a drag gesture reaches range math without an anchor.

    The drag state machine only enters the dragging state with a concrete
    anchor, so hitting this means a caller drove the controller or the
    selection model out of order.
    """

    def __init__(self, reason: str, anchor: object = None, last: object = None) -> None:
        """Initialize the exception.

        Args:
            reason: What the caller did wrong
            anchor: Anchor key at the time of the violation
            last: Last key at the time of the violation
        """
        self.reason = reason
        self.anchor = anchor
        self.last = last
        super().__init__(
            f"Drag contract violated: {reason}",
            details=f"anchor={anchor}, last={last}",
        )


class ConfigurationError(PhotoGridError):
    """Raised when there's a configuration-related error."""

    def __init__(self, setting_name: str | None = None, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            setting_name: Optional name of the problematic setting
            reason: Optional reason for the error
        """
        self.setting_name = setting_name
        self.reason = reason

        if setting_name:
            msg = f"Configuration error for '{setting_name}'"
        else:
            msg = "Configuration error"

        if reason:
            msg += f": {reason}"

        super().__init__(msg)


class ValidationError(PhotoGridError):
    """Raised when input validation fails."""

    def __init__(
        self,
        field: str,
        value: str | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            field: Name of the field that failed validation
            value: Optional value that failed validation
            reason: Optional reason for the validation failure
        """
        self.field = field
        self.value = value
        self.reason = reason

        msg = f"Validation error for '{field}'"
        if reason:
            msg += f": {reason}"

        super().__init__(msg, details=f"value={value}" if value is not None else None)


# Exception hierarchy summary:
# PhotoGridError (base)
# ├── DragContractError
# ├── ConfigurationError
# └── ValidationError
