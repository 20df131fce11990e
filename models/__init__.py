# -*- coding: utf-8 -*-
"""
Processing Batch Desk Data Models
"""

from .processing_batch import (
    Procurement,
    InitialCriteria,
    FirstStageDetails,
    BatchCreatePayload,
    ProcessingBatch,
)

__all__ = [
    "Procurement",
    "InitialCriteria",
    "FirstStageDetails",
    "BatchCreatePayload",
    "ProcessingBatch",
]
