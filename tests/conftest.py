# -*- coding: utf-8 -*-
"""Shared fixtures for the test suite."""

import os
import tempfile

# Must be set before app.config is imported
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="procdash-logs-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from datetime import date
from unittest.mock import Mock

import pytest

from models.processing_batch import Procurement
from services.api_client import ApiConfig, ProcessingApiClient, reset_api_client


def _make_response(status_code=200, body=None, text=None, reason="OK"):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.reason = reason
    if body is None and text is None:
        response.text = ""
        response.json.side_effect = ValueError("No JSON object could be decoded")
    elif text is not None:
        response.text = text
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.text = "json"
        response.json.return_value = body
    return response


@pytest.fixture
def make_response():
    """Factory for requests.Response stand-ins."""
    return _make_response


@pytest.fixture(autouse=True)
def _fresh_api_client():
    reset_api_client()
    yield
    reset_api_client()


@pytest.fixture
def session():
    """Mocked requests.Session."""
    return Mock()


@pytest.fixture
def api_client(session):
    """API client bound to a mocked session."""
    return ProcessingApiClient(ApiConfig(base_url="http://backend.test/", timeout=5, verify_ssl=True), session=session)


@pytest.fixture
def coffee_procurements():
    """Three procurements from the same crop / lot / form."""
    return [
        Procurement(id=11, crop="Coffee", lot_no=7, procured_form="cherry", quantity=120.0, farmer_name="Asha"),
        Procurement(id=12, crop="Coffee", lot_no=7, procured_form="cherry", quantity=80.5, farmer_name="Ravi"),
        Procurement(id=13, crop="Coffee", lot_no=7, procured_form="cherry", quantity=42.0, farmer_name="Meena"),
    ]


@pytest.fixture
def mixed_procurements():
    """Two procurements that differ in procured form."""
    return [
        Procurement(id=21, crop="Pepper", lot_no=3, procured_form="green"),
        Procurement(id=22, crop="Pepper", lot_no=3, procured_form="dried"),
    ]


@pytest.fixture
def first_stage_values():
    """Valid P1 form values."""
    return {"processMethod": "wet", "dateOfProcessing": date(2024, 3, 1), "doneBy": "Kiran"}
