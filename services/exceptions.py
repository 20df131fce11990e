# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised when the backend answers with an error status."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    @property
    def server_error(self) -> str:
        """The backend's own error text, if the body carried one."""
        return self.response_data.get("error") or self.response_data.get("message") or ""

    @property
    def details(self) -> list:
        """Structured field-level details from the body ([] when absent)."""
        details = self.response_data.get("details")
        return details if isinstance(details, list) else []

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class SubmissionPreconditionError(ValidationException):
    """A required value is missing or invalid at batch submission time."""


class NetworkException(Exception):
    """Exception raised for network/connection or response parsing errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
