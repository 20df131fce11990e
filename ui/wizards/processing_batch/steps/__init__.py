# -*- coding: utf-8 -*-
"""
Processing Batch Steps Package.

Contains individual steps for the processing batch wizard:
- Step 1: Select Criteria
- Step 2: Select Procurements
- Step 3: First Stage Details (P1)
- Step 4: Review & Submit
"""

from .select_criteria_step import SelectCriteriaStep
from .select_procurements_step import SelectProcurementsStep
from .first_stage_details_step import FirstStageDetailsStep
from .review_submit_step import ReviewSubmitStep

__all__ = [
    'SelectCriteriaStep',
    'SelectProcurementsStep',
    'FirstStageDetailsStep',
    'ReviewSubmitStep'
]
