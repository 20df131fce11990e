# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from typing import Any, List, Optional, Tuple

from services.translation_manager import tr
from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


def format_error_details(details: Optional[List[Any]]) -> Optional[str]:
    """
    Render the backend's structured field errors.

    Each {"path": ["firstStageDetails", "doneBy"], "message": "Required"}
    becomes "firstStageDetails.doneBy: Required"; items are joined with ", ".
    Returns None when there are no details.
    """
    if not details:
        return None

    parts = []
    for detail in details:
        if not isinstance(detail, dict):
            parts.append(str(detail))
            continue
        path = detail.get("path") or []
        if isinstance(path, (list, tuple)):
            path = ".".join(str(p) for p in path)
        parts.append(f"{path}: {detail.get('message', '')}")
    return ", ".join(parts)


def map_api_error(error: ApiException, fallback_key: str = "submit.failed") -> Tuple[str, Optional[str]]:
    """Map a server rejection to (message, description) for display."""
    if error.status_code:
        logger.warning(f"API error ({error.status_code}) in {error.context or 'request'}: {error.response_data}")
    message = error.server_error or tr(fallback_key)
    return message, format_error_details(error.details)


def map_network_error(error: NetworkException) -> str:
    """Map a transport or parsing failure to a client-side error message."""
    reason = error.message or tr("submit.unknown_error")
    original = str(error.original_error or "").lower()
    if "timeout" in original or "timed out" in original:
        reason = tr("error.api.timeout")
    return tr("submit.client_error", reason=reason)


def map_exception(error: Exception, fallback_key: str = "submit.failed") -> Tuple[str, Optional[str]]:
    """
    Map any exception to (message, description) for display.

    Server rejections keep the server's own text; everything else is
    reported as a client-side error.
    """
    if isinstance(error, ApiException):
        return map_api_error(error, fallback_key)

    if isinstance(error, NetworkException):
        return map_network_error(error), None

    if isinstance(error, ValidationException):
        return error.message, None

    logger.error(f"Unexpected error: {error}", exc_info=True)
    return tr("submit.client_error", reason=str(error) or tr("submit.unknown_error")), None
