# -*- coding: utf-8 -*-
"""
Processing Batch Desk Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ProcessingApiClient",
    "BatchSubmissionService",
    "DataEventBus",
    "get_api_client",
    "get_event_bus",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("ProcessingApiClient", "get_api_client"):
        from . import api_client
        return getattr(api_client, name)
    elif name == "BatchSubmissionService":
        from .batch_submission_service import BatchSubmissionService
        return BatchSubmissionService
    elif name in ("DataEventBus", "get_event_bus"):
        from . import event_bus
        return getattr(event_bus, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
