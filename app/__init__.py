# -*- coding: utf-8 -*-
"""
Processing Batch Desk Application Core Module
"""

from .config import Config, Pages, Endpoints

__all__ = ["Config", "Pages", "Endpoints"]
