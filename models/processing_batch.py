# -*- coding: utf-8 -*-
"""
Processing batch entity models.

Records exchanged with the processing backend while creating a batch:
eligible procurements, the wizard's criteria and first-stage (P1) details,
the creation request body and the created batch.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union


@dataclass
class Procurement:
    """A sourced input record eligible for inclusion into a new batch."""

    id: Union[int, str]
    crop: Optional[str] = None
    lot_no: Optional[int] = None
    procured_form: Optional[str] = None
    quantity: Optional[float] = None
    farmer_name: Optional[str] = None
    date: Optional[str] = None

    @property
    def identity(self) -> tuple:
        """The (crop, lot_no, procured_form) triple a batch is locked to."""
        return (self.crop, self.lot_no, self.procured_form)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Procurement":
        """Create Procurement from an API record (camelCase keys)."""
        farmer = data.get("farmer")
        farmer_name = data.get("farmerName")
        if farmer_name is None and isinstance(farmer, dict):
            farmer_name = farmer.get("name")

        lot_no = data.get("lotNo", data.get("lot_no"))
        try:
            lot_no = int(lot_no) if lot_no is not None else None
        except (TypeError, ValueError):
            lot_no = None

        return cls(
            id=data["id"],
            crop=data.get("crop"),
            lot_no=lot_no,
            procured_form=data.get("procuredForm", data.get("procured_form")),
            quantity=data.get("quantity"),
            farmer_name=farmer_name,
            date=data.get("date") or data.get("dateOfProcurement"),
        )


@dataclass
class InitialCriteria:
    """Crop / lot filter captured when leaving the criteria step."""

    crop: Optional[str] = None
    lot_no: Optional[int] = None

    def to_dict(self) -> dict:
        return {"crop": self.crop, "lotNo": self.lot_no}


@dataclass
class FirstStageDetails:
    """First processing stage (P1) details entered in the wizard."""

    process_method: Optional[str] = None
    date_of_processing: Optional[Union[datetime, date, str]] = None
    done_by: Optional[str] = None

    @classmethod
    def from_form_values(cls, values: Dict[str, Any]) -> "FirstStageDetails":
        """Build from a step form's values (camelCase field names)."""
        return cls(
            process_method=values.get("processMethod") or None,
            date_of_processing=values.get("dateOfProcessing") or None,
            done_by=values.get("doneBy") or None,
        )

    def to_dict(self) -> dict:
        when = self.date_of_processing
        if isinstance(when, (datetime, date)):
            when = when.isoformat()
        return {
            "processMethod": self.process_method,
            "dateOfProcessing": when,
            "doneBy": self.done_by,
        }


@dataclass
class BatchCreatePayload:
    """Body of POST /api/processing-batches."""

    crop: str
    lot_no: int
    procurement_ids: List[Union[int, str]]
    process_method: str
    date_of_processing: str  # UTC timestamp string
    done_by: str

    def to_dict(self) -> dict:
        """Convert to the request's JSON shape."""
        return {
            "crop": self.crop,
            "lotNo": self.lot_no,
            "procurementIds": list(self.procurement_ids),
            "firstStageDetails": {
                "processMethod": self.process_method,
                "dateOfProcessing": self.date_of_processing,
                "doneBy": self.done_by,
            },
        }


@dataclass
class ProcessingBatch:
    """A created processing batch as returned by the backend."""

    id: Union[int, str, None] = None
    batch_code: Optional[str] = None
    crop: Optional[str] = None
    lot_no: Optional[int] = None
    procured_form: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProcessingBatch":
        """Create ProcessingBatch from an API response body."""
        data = data or {}
        return cls(
            id=data.get("id"),
            batch_code=data.get("batchCode"),
            crop=data.get("crop"),
            lot_no=data.get("lotNo"),
            procured_form=data.get("procuredForm"),
            status=data.get("status"),
            created_at=data.get("createdAt"),
            raw=data,
        )
