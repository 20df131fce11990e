# -*- coding: utf-8 -*-
"""
Processing Batch Desk UI Components
"""

from .toast import Toast

__all__ = [
    "Toast",
]
