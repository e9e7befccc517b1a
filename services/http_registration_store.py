# -*- coding: utf-8 -*-
"""
HTTP Registration Store - REST backend for the organization directory
and registration submissions.

Endpoints:
    GET  {base_url}/schools         -> [{"id", "name", "city"}, ...]
    POST {base_url}/registrations   -> {"referenceNumber", "submittedAt"}
"""

from typing import Any, Dict, List, Optional

import requests

from models.registration import Organization, RegistrationDraft, SubmissionReceipt
from services.exceptions import ApiException, NetworkException
from services.registration_store import RegistrationStore, StoreResponse, StoreType
from utils.logger import get_logger

logger = get_logger(__name__)


class HttpRegistrationStore(RegistrationStore):
    """
    Registration store backed by the event REST API.

    The directory is cached after the first successful fetch; it is only
    queried once at startup anyway.

    Usage:
        store = HttpRegistrationStore("https://events.example.org/api")
        schools = store.get_schools()
    """

    def __init__(self, base_url: str, timeout: int = 15, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self._schools_cache: Optional[List[Organization]] = None

    @property
    def store_type(self) -> StoreType:
        return StoreType.HTTP

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Perform an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint (e.g., "/schools")
            json_data: JSON payload
            params: Query parameters

        Returns:
            Response JSON data (None for empty bodies)
        """
        url = f"{self.base_url}{endpoint}"
        logger.info(f"[API REQ] {method} {endpoint}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()

            result = response.json() if response.text else None
            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

    def get_schools(self) -> List[Organization]:
        if self._schools_cache is None:
            payload = self._request("GET", "/schools") or []
            if isinstance(payload, dict):
                payload = payload.get("items", [])
            if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
                logger.error(f"Unexpected /schools payload: {payload!r}")
                raise ApiException(
                    message="Malformed organization directory",
                    response_data={"payload": payload},
                    context="schools",
                )
            self._schools_cache = [Organization.from_dict(item) for item in payload]
            logger.debug(f"Fetched {len(self._schools_cache)} organizations")
        return list(self._schools_cache)

    def submit_form(self, draft: RegistrationDraft) -> StoreResponse:
        try:
            payload = self._request("POST", "/registrations", json_data=draft.to_dict()) or {}
        except ApiException as e:
            return StoreResponse.fail(str(e), f"E{e.status_code}")
        except NetworkException as e:
            return StoreResponse.fail(e.message, "E_CONN")

        receipt = SubmissionReceipt.from_dict(payload)
        if not receipt.organization_id:
            receipt.organization_id = draft.organization_id or None
        logger.info(f"Registration accepted by API: {receipt.reference_number}")
        return StoreResponse.ok(receipt)
