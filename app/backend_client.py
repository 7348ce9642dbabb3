"""Helper client used by the Streamlit app to talk to the API or fall back to local services."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests
from requests import Response

from backend.db.repo import get_repository
from backend.models.property import FilterCriteria, PaginatedResult, Property, PropertyDraft
from backend.services.listing_service import ListingService
from backend.utils.logging import get_logger

LOGGER = get_logger("app.client")

API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

TIMEOUT_MESSAGE = "Request timed out. Please try again."
CONNECTION_MESSAGE = "Failed to connect to API server. Please check your connection and try again."


class ApiError(Exception):
    """Uniform error for anything that goes wrong talking to the listings API.

    ``status`` is the HTTP status code, or 0 when no response was received
    (timeouts and connection failures).
    """

    def __init__(self, status: int, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.errors = list(errors or [])


class BackendClient:
    def __init__(self, base_url: Optional[str] = None, timeout: float = API_TIMEOUT, use_api: Optional[bool] = None) -> None:
        self.base_url = (base_url or os.getenv("API_BASE_URL", "http://localhost:8000")).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.service: Optional[ListingService] = None
        self.use_api = self._ping_api() if use_api is None else use_api
        if not self.use_api:
            self._enable_local_mode()

    def _ping_api(self) -> bool:
        try:
            resp = self.session.get(f"{self.base_url}/api/health", timeout=2)
            return resp.status_code == 200
        except requests.RequestException:
            return False

    # ------------------------------------------------------------------
    # Queries
    def get_listings(self, criteria: Optional[FilterCriteria] = None) -> PaginatedResult[Property]:
        criteria = criteria or FilterCriteria()
        if not self.use_api:
            return self.service.get_listings(criteria.normalized())
        data = self._request("GET", "/listings", params=criteria.to_query_params())
        return PaginatedResult[Property].model_validate(data)

    def get_listing(self, property_id: int) -> Property:
        if not self.use_api:
            listing = self.service.get_listing(property_id)
            if listing is None:
                raise ApiError(404, "Listing not found", [f"No listing found with ID {property_id}"])
            return listing
        return Property.model_validate(self._request("GET", f"/listings/{property_id}"))

    def search_listings(self, criteria: Optional[FilterCriteria] = None) -> List[Property]:
        criteria = criteria or FilterCriteria()
        if not self.use_api:
            return self.service.search_listings(criteria)
        params = criteria.to_query_params()
        params.pop("page", None)
        params.pop("pageSize", None)
        data = self._request("GET", "/listings/search", params=params)
        return [Property.model_validate(item) for item in data or []]

    def get_featured_listings(self) -> List[Property]:
        return self.search_listings(FilterCriteria(is_featured=True, sort_by="createdAt", sort_order="desc"))

    # ------------------------------------------------------------------
    # Mutations
    def create_listing(self, draft: PropertyDraft) -> Property:
        if not self.use_api:
            return self.service.create_listing(draft)
        data = self._request("POST", "/listings", json=draft.model_dump(mode="json", by_alias=True))
        return Property.model_validate(data)

    def update_listing(self, property_id: int, draft: PropertyDraft) -> Property:
        if not self.use_api:
            updated = self.service.update_listing(property_id, draft)
            if updated is None:
                raise ApiError(404, "Listing not found", [f"No listing found with ID {property_id}"])
            return updated
        data = self._request("PUT", f"/listings/{property_id}", json=draft.model_dump(mode="json", by_alias=True))
        return Property.model_validate(data)

    def delete_listing(self, property_id: int) -> None:
        if not self.use_api:
            if not self.service.delete_listing(property_id):
                raise ApiError(404, "Listing not found", [f"No listing found with ID {property_id}"])
            return
        self._request("DELETE", f"/listings/{property_id}")

    # ------------------------------------------------------------------
    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        url = f"{self.base_url}/api{endpoint}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as exc:
            LOGGER.warning("api_timeout method=%s url=%s", method, url)
            raise ApiError(0, TIMEOUT_MESSAGE) from exc
        except requests.RequestException as exc:
            LOGGER.warning("api_unreachable method=%s url=%s error=%s", method, url, exc)
            raise ApiError(0, CONNECTION_MESSAGE) from exc
        payload = self._decode(resp)
        if not resp.ok or not payload.get("success", False):
            raise ApiError(
                resp.status_code,
                payload.get("message") or "An error occurred",
                payload.get("errors") or [],
            )
        return payload.get("data")

    def _decode(self, response: Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    def _enable_local_mode(self) -> None:
        if self.service is None:
            LOGGER.info("API unavailable at %s; using in-process listing service", self.base_url)
            self.service = ListingService(get_repository())
        self.use_api = False
