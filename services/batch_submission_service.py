# -*- coding: utf-8 -*-
"""
Batch submission service.

Turns a completed wizard session into a creation request:
pre-submission checks, payload building, and the POST itself.
"""

from typing import Optional, TYPE_CHECKING

from models.processing_batch import BatchCreatePayload, ProcessingBatch
from services.api_client import ProcessingApiClient, get_api_client
from services.exceptions import SubmissionPreconditionError
from services.translation_manager import tr
from utils.datetime_utils import to_utc_timestamp, InvalidDateError
from utils.logger import get_logger

if TYPE_CHECKING:
    from ui.wizards.processing_batch.batch_context import ProcessingBatchContext

logger = get_logger(__name__)


class BatchSubmissionService:
    """Builds and sends the processing batch creation request."""

    def __init__(self, api_client: Optional[ProcessingApiClient] = None):
        self._api_client = api_client

    @property
    def api_client(self) -> ProcessingApiClient:
        if self._api_client is None:
            self._api_client = get_api_client()
        return self._api_client

    def build_payload(self, context: 'ProcessingBatchContext') -> BatchCreatePayload:
        """
        Check the session is submittable and build the request body.

        Checks run in order: processing date, process method, done by,
        locked batch identity.

        Raises:
            SubmissionPreconditionError: with the message for the first failed check
        """
        details = context.first_stage_details

        try:
            date_string = to_utc_timestamp(details.date_of_processing)
        except InvalidDateError as e:
            raise SubmissionPreconditionError(
                tr("submit.date_invalid", reason=str(e)), field="dateOfProcessing"
            )
        if not date_string:
            raise SubmissionPreconditionError(tr("submit.date_missing"), field="dateOfProcessing")

        if not details.process_method:
            raise SubmissionPreconditionError(tr("submit.process_method_missing"), field="processMethod")

        if not details.done_by:
            raise SubmissionPreconditionError(tr("submit.done_by_missing"), field="doneBy")

        if not context.is_ready_for_submission():
            raise SubmissionPreconditionError(tr("submit.criteria_incomplete"), field="lockedCriteria")

        return BatchCreatePayload(
            crop=context.locked_crop,
            lot_no=context.locked_lot_no,
            procurement_ids=list(context.selected_procurement_ids),
            process_method=details.process_method,
            date_of_processing=date_string,
            done_by=details.done_by,
        )

    def submit(self, payload: BatchCreatePayload) -> ProcessingBatch:
        """
        Send the creation request.

        Raises:
            ApiException: the backend rejected the batch
            NetworkException: transport or response parsing failure
        """
        logger.info(
            f"Submitting processing batch: crop={payload.crop} lot={payload.lot_no} "
            f"procurements={len(payload.procurement_ids)}"
        )
        return self.api_client.create_processing_batch(payload)
