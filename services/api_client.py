# -*- coding: utf-8 -*-
"""
Processing Backend API Client
=============================

HTTP access to the processing backend: batch creation, the procurements
eligible for a new batch, and the sales list.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from app.config import Config, Endpoints
from models.processing_batch import BatchCreatePayload, Procurement, ProcessingBatch
from services.exceptions import ApiException, NetworkException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    Connection settings for the backend API.

    Values left as None are read from Config (which reads .env).

    Example .env:
        API_BASE_URL=http://192.168.1.20:5000
        API_TIMEOUT=30
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class ProcessingApiClient:
    """
    Client for the processing backend.

    Usage:
        client = ProcessingApiClient(ApiConfig(base_url="http://localhost:5000"))
        client.set_access_token(token)
        batch = client.create_processing_batch(payload)
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.session = session or requests.Session()
        self.access_token: Optional[str] = None

    # ==================== Authentication ====================

    def set_access_token(self, token: Optional[str]):
        """Use a token obtained by the login flow for subsequent requests."""
        self.access_token = token
        logger.debug("Access token updated" if token else "Access token cleared")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    # ==================== Transport ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        expected_status: Optional[int] = None
    ) -> Any:
        """
        Execute an HTTP request and decode its JSON body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/api/processing-batches")
            json_data: JSON payload
            params: Query parameters
            expected_status: Exact status required for success; any 2xx when None

        Returns:
            Decoded response body (None for an empty body)

        Raises:
            ApiException: the server answered with an error (or unexpected) status
            NetworkException: connection, timeout or unreadable body
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.info(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)

        try:
            result = response.json() if response.text else None
        except ValueError as e:
            logger.error(f"[API ERR] {response.status_code} {method} {endpoint} | Unreadable body: {response.text[:500]}")
            raise NetworkException(
                message=tr("error.api.invalid_response"),
                original_error=e,
                context=endpoint
            )

        ok = response.status_code == expected_status if expected_status else response.ok
        if not ok:
            response_data = result if isinstance(result, dict) else {}
            logger.error(f"[API ERR] {response.status_code} {method} {endpoint} | Response: {response_data or response.text[:500]}")
            raise ApiException(
                message=response_data.get("error") or response.reason or "Request failed",
                status_code=response.status_code,
                response_data=response_data,
                context=endpoint
            )

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        if result:
            res_str = json.dumps(result, ensure_ascii=False, default=str)
            if len(res_str) > 1000:
                logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
            else:
                logger.debug(f"[API RES] Body: {res_str}")

        return result

    # ==================== Processing Batches ====================

    def create_processing_batch(self, payload: BatchCreatePayload) -> ProcessingBatch:
        """
        Create a processing batch and start its first stage.

        POST /api/processing-batches -> 201 with the created record.
        """
        data = self._request(
            "POST",
            Endpoints.PROCESSING_BATCHES,
            json_data=payload.to_dict(),
            expected_status=201
        )
        batch = ProcessingBatch.from_dict(data if isinstance(data, dict) else {})
        logger.info(f"Processing batch created: id={batch.id} code={batch.batch_code}")
        return batch

    # ==================== Procurements ====================

    def get_eligible_procurements(
        self,
        crop: Optional[str] = None,
        lot_no: Optional[int] = None
    ) -> List[Procurement]:
        """
        Procurements that can still be assigned to a new batch.

        GET /api/procurements?crop=...&lotNo=...&unbatched=true
        """
        params: Dict[str, Any] = {"unbatched": "true"}
        if crop:
            params["crop"] = crop
        if lot_no is not None:
            params["lotNo"] = lot_no

        data = self._request("GET", Endpoints.PROCUREMENTS, params=params)
        if isinstance(data, dict):
            data = data.get("procurements") or data.get("data") or []
        try:
            return [Procurement.from_dict(item) for item in (data or [])]
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"[API ERR] GET {Endpoints.PROCUREMENTS} | Malformed procurement record: {e!r}")
            raise NetworkException(
                message=tr("error.api.invalid_response"),
                original_error=e,
                context=Endpoints.PROCUREMENTS
            )

    # ==================== Sales ====================

    def get_sales_list(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        GET /api/sales with the given query parameters.

        Returns the "sales" array of the body, or the body itself when the
        server answers with a bare list.
        """
        try:
            data = self._request("GET", Endpoints.SALES, params=params or None)
        except ApiException as e:
            e.message = e.server_error or tr("error.sales.load_failed")
            raise
        if isinstance(data, dict):
            return data.get("sales") or []
        return data or []


# Singleton instance
_api_client_instance: Optional[ProcessingApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> ProcessingApiClient:
    """
    Get the shared ProcessingApiClient.

    Args:
        config: Connection settings (used only on first call)
    """
    global _api_client_instance

    if _api_client_instance is None:
        _api_client_instance = ProcessingApiClient(config or ApiConfig())

    return _api_client_instance


def reset_api_client():
    """Drop the shared client (used by tests)."""
    global _api_client_instance
    _api_client_instance = None
