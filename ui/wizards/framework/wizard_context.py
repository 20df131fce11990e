# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for wizard session state.

Provides the session identity (id, reference number, timestamps) shared
by all wizard contexts.
"""

from datetime import datetime
from abc import ABC, abstractmethod
import uuid


class WizardContext(ABC):
    """
    Base class for wizard context.

    Subclasses implement reset(), which returns session data to its
    initial empty values.
    """

    def __init__(self):
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = self.created_at
        self.reference_number: str = self._generate_reference_number()

    def _generate_reference_number(self) -> str:
        """
        Generate a reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: WIZ-20260118153045-A3F2
        """
        timestamp = self.created_at.strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"{self._get_reference_prefix()}-{timestamp}-{short_id}"

    def _get_reference_prefix(self) -> str:
        """Get the prefix for reference number. Override in subclasses."""
        return "WIZ"

    def touch(self):
        """Record a mutation."""
        self.updated_at = datetime.now()

    @abstractmethod
    def reset(self):
        """Return all session data to its initial values."""
