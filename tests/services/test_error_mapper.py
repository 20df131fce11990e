# -*- coding: utf-8 -*-
"""Tests for the error message mapper."""

import requests

from services.error_mapper import (
    format_error_details, map_api_error, map_exception, map_network_error
)
from services.exceptions import ApiException, NetworkException, ValidationException


class TestFormatErrorDetails:

    def test_paths_are_dotted_and_joined(self):
        details = [
            {"path": ["firstStageDetails", "doneBy"], "message": "Required"},
            {"path": ["lotNo"], "message": "Expected number"},
        ]

        assert format_error_details(details) == "firstStageDetails.doneBy: Required, lotNo: Expected number"

    def test_string_path(self):
        assert format_error_details([{"path": "crop", "message": "Bad"}]) == "crop: Bad"

    def test_empty(self):
        assert format_error_details([]) is None
        assert format_error_details(None) is None


class TestMapApiError:

    def test_server_error_text_is_used(self):
        error = ApiException(
            "Bad Request", status_code=400,
            response_data={"error": "Validation failed", "details": [{"path": ["crop"], "message": "Required"}]}
        )

        assert map_api_error(error) == ("Validation failed", "crop: Required")

    def test_fallback_without_body(self):
        error = ApiException("Internal Server Error", status_code=500)

        assert map_api_error(error) == ("Failed to create processing batch", None)


class TestMapNetworkError:

    def test_connection_failure(self):
        error = NetworkException("Connection refused", original_error=requests.exceptions.ConnectionError("refused"))

        assert map_network_error(error) == "Client-side error: Connection refused"

    def test_timeout(self):
        error = NetworkException("x", original_error=requests.exceptions.Timeout("Read timed out"))

        assert map_network_error(error) == "Client-side error: The server took too long to respond."


class TestMapException:

    def test_validation(self):
        assert map_exception(ValidationException("P1 Done By is missing.")) == ("P1 Done By is missing.", None)

    def test_unexpected(self):
        assert map_exception(RuntimeError("boom")) == ("Client-side error: boom", None)
