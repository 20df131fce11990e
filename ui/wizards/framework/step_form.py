# -*- coding: utf-8 -*-
"""
Step Form - Qt-free value holder bound to a wizard step.

A step widget writes its inputs into a StepForm; the orchestrating
controller calls trigger() to validate and reads get_values() to commit.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


@dataclass
class FieldError:
    """
    A single validation error.

    ref names the input the error is bound to. Cross-field errors
    (e.g. "at least one of crop / lot no") carry no ref.
    """
    message: Optional[str] = None
    ref: Optional[str] = None


FieldErrors = Dict[str, FieldError]
FormValidator = Callable[[Dict[str, Any]], FieldErrors]


class StepForm:
    """Form state for one wizard step."""

    def __init__(self, validator: FormValidator, defaults: Optional[Dict[str, Any]] = None):
        self._validator = validator
        self._defaults: Dict[str, Any] = dict(defaults or {})
        self._values: Dict[str, Any] = dict(self._defaults)
        self.errors: FieldErrors = {}

    def set_value(self, name: str, value: Any):
        self._values[name] = value
        self.errors.pop(name, None)

    def set_values(self, values: Dict[str, Any]):
        for name, value in values.items():
            self.set_value(name, value)

    def get_values(self) -> Dict[str, Any]:
        """Return a copy of the current values."""
        return dict(self._values)

    def get_value(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def trigger(self) -> bool:
        """Run validation over all values; True when there are no errors."""
        self.errors = self._validator(self.get_values()) or {}
        return not self.errors

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def reset(self, values: Optional[Dict[str, Any]] = None):
        """Restore defaults (or the given values) and clear errors."""
        self._values = dict(self._defaults)
        if values:
            self._values.update(values)
        self.errors = {}
