from typing import Optional


class RecordValidationError(ValueError):
    """Rejected submission. Each subclass carries a fixed, user-facing message."""

    message = "Invalid student record."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidName(RecordValidationError):
    message = "Name should only contain letters and spaces."


class InvalidAge(RecordValidationError):
    message = "Age should be a positive integer between 1 and 100."


class InvalidMarks(RecordValidationError):
    message = "All marks must be between 0 and 100."


class StaleEditError(RecordValidationError):
    message = (
        "The record being edited no longer exists. "
        "Submit again to add it as a new record."
    )
