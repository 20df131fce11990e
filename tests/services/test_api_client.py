# -*- coding: utf-8 -*-
"""
Tests for ProcessingApiClient.

The requests session is mocked; no HTTP traffic leaves the test.
"""

import pytest
import requests

from models.processing_batch import BatchCreatePayload
from services.api_client import ApiConfig, get_api_client
from services.exceptions import ApiException, NetworkException


@pytest.fixture
def payload():
    return BatchCreatePayload(
        crop="Coffee",
        lot_no=7,
        procurement_ids=[11, 12],
        process_method="wet",
        date_of_processing="2024-03-01T00:00:00.000Z",
        done_by="Kiran",
    )


class TestCreateProcessingBatch:

    def test_posts_wire_payload(self, api_client, session, payload, make_response):
        session.request.return_value = make_response(201, {"id": 5, "batchCode": "PB-0005", "crop": "Coffee"})

        batch = api_client.create_processing_batch(payload)

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://backend.test/api/processing-batches"
        assert kwargs["json"] == {
            "crop": "Coffee",
            "lotNo": 7,
            "procurementIds": [11, 12],
            "firstStageDetails": {
                "processMethod": "wet",
                "dateOfProcessing": "2024-03-01T00:00:00.000Z",
                "doneBy": "Kiran",
            },
        }
        assert kwargs["timeout"] == 5
        assert batch.id == 5
        assert batch.batch_code == "PB-0005"

    def test_only_201_counts_as_created(self, api_client, session, payload, make_response):
        session.request.return_value = make_response(200, {"id": 5})

        with pytest.raises(ApiException) as exc_info:
            api_client.create_processing_batch(payload)

        assert exc_info.value.status_code == 200

    def test_rejection_keeps_body(self, api_client, session, payload, make_response):
        body = {"error": "Validation failed", "details": [{"path": ["lotNo"], "message": "Required"}]}
        session.request.return_value = make_response(400, body, reason="Bad Request")

        with pytest.raises(ApiException) as exc_info:
            api_client.create_processing_batch(payload)

        error = exc_info.value
        assert error.status_code == 400
        assert error.message == "Validation failed"
        assert error.details == body["details"]

    def test_connection_error(self, api_client, session, payload):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(NetworkException) as exc_info:
            api_client.create_processing_batch(payload)

        assert isinstance(exc_info.value.original_error, requests.exceptions.ConnectionError)

    def test_unreadable_body(self, api_client, session, payload, make_response):
        session.request.return_value = make_response(502, text="<html>Bad Gateway</html>", reason="Bad Gateway")

        with pytest.raises(NetworkException) as exc_info:
            api_client.create_processing_batch(payload)

        assert exc_info.value.message == "The server returned an unreadable response."


class TestAuthorization:

    def test_bearer_header_once_token_set(self, api_client, session, make_response):
        session.request.return_value = make_response(200, [])

        api_client.get_eligible_procurements("Coffee")
        assert "Authorization" not in session.request.call_args.kwargs["headers"]

        api_client.set_access_token("abc123")
        api_client.get_eligible_procurements("Coffee")
        assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer abc123"


class TestEligibleProcurements:

    def test_query_and_parsing(self, api_client, session, make_response):
        session.request.return_value = make_response(200, {"procurements": [
            {"id": 1, "crop": "Coffee", "lotNo": "7", "procuredForm": "cherry", "farmer": {"name": "Asha"}},
        ]})

        result = api_client.get_eligible_procurements("Coffee", 7)

        assert session.request.call_args.kwargs["params"] == {"unbatched": "true", "crop": "Coffee", "lotNo": 7}
        assert len(result) == 1
        assert result[0].identity == ("Coffee", 7, "cherry")
        assert result[0].farmer_name == "Asha"

    def test_bare_list_body(self, api_client, session, make_response):
        session.request.return_value = make_response(200, [{"id": 3, "crop": "Cocoa"}])

        result = api_client.get_eligible_procurements(lot_no=2)

        assert session.request.call_args.kwargs["params"] == {"unbatched": "true", "lotNo": 2}
        assert [p.id for p in result] == [3]

    def test_record_without_id_is_unreadable(self, api_client, session, make_response):
        session.request.return_value = make_response(200, [{"crop": "Coffee", "lotNo": 7}])

        with pytest.raises(NetworkException) as exc_info:
            api_client.get_eligible_procurements("Coffee", 7)

        assert exc_info.value.message == "The server returned an unreadable response."
        assert isinstance(exc_info.value.original_error, KeyError)

    def test_non_object_record_is_unreadable(self, api_client, session, make_response):
        session.request.return_value = make_response(200, {"procurements": ["11", "12"]})

        with pytest.raises(NetworkException):
            api_client.get_eligible_procurements()


class TestSalesList:

    def test_sales_key(self, api_client, session, make_response):
        session.request.return_value = make_response(200, {"sales": [{"id": 1}], "total": 1})

        assert api_client.get_sales_list({"page": 2}) == [{"id": 1}]
        assert session.request.call_args.kwargs["params"] == {"page": 2}

    def test_bare_list(self, api_client, session, make_response):
        session.request.return_value = make_response(200, [{"id": 9}])

        assert api_client.get_sales_list() == [{"id": 9}]

    def test_failure_message(self, api_client, session, make_response):
        session.request.return_value = make_response(500, {}, reason="Internal Server Error")

        with pytest.raises(ApiException) as exc_info:
            api_client.get_sales_list()

        assert exc_info.value.message == "Failed to fetch sales list"

    def test_failure_keeps_server_text(self, api_client, session, make_response):
        session.request.return_value = make_response(403, {"error": "Forbidden for role"}, reason="Forbidden")

        with pytest.raises(ApiException) as exc_info:
            api_client.get_sales_list()

        assert exc_info.value.message == "Forbidden for role"


def test_shared_client_uses_first_config():
    first = get_api_client(ApiConfig(base_url="http://one.test"))
    second = get_api_client(ApiConfig(base_url="http://two.test"))

    assert first is second
    assert first.base_url == "http://one.test"
