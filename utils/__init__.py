# -*- coding: utf-8 -*-
"""
Processing Batch Desk Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import to_utc_timestamp, parse_date_value, InvalidDateError

__all__ = [
    "get_logger",
    "setup_logger",
    "to_utc_timestamp",
    "parse_date_value",
    "InvalidDateError",
]
