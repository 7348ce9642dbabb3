import json

import pytest
import requests
from requests.models import Response

from app.backend_client import CONNECTION_MESSAGE, TIMEOUT_MESSAGE, ApiError, BackendClient
from backend.db.repo import reset_repository
from backend.models.property import FilterCriteria, PropertyDraft

LISTING = {
    "id": 3,
    "title": "Luxury Waterfront Condo",
    "price": 1200000.0,
    "bedrooms": 3,
    "bathrooms": 2,
    "sqft": 1800,
    "description": "",
    "address": "789 Harbor Blvd, Waterfront, City",
    "imageUrl": "/house-sample.jpg",
    "imageUrls": [],
    "isFeatured": True,
    "features": ["Pool"],
    "propertyType": "Condo",
    "status": "Available",
    "createdAt": "2026-01-01T00:00:00+00:00",
    "updatedAt": "2026-01-01T00:00:00+00:00",
}


def _response(status_code: int, payload) -> Response:
    resp = Response()
    resp.status_code = status_code
    resp._content = json.dumps(payload).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    return resp


def _client(monkeypatch, handler) -> BackendClient:
    client = BackendClient(base_url="http://api.test", use_api=True)
    calls = []

    def fake_request(method, url, **kwargs):
        calls.append((method, url, kwargs))
        return handler(method, url, **kwargs)

    monkeypatch.setattr(client.session, "request", fake_request)
    client.calls = calls
    return client


def test_get_listings_sends_camel_case_params(monkeypatch):
    envelope = {
        "success": True,
        "data": {
            "items": [LISTING],
            "totalCount": 1,
            "page": 1,
            "pageSize": 6,
            "totalPages": 1,
            "hasNextPage": False,
            "hasPreviousPage": False,
        },
        "message": "Listings retrieved successfully",
        "errors": [],
    }
    client = _client(monkeypatch, lambda *a, **k: _response(200, envelope))
    result = client.get_listings(FilterCriteria(min_price=500000, page_size=6, is_featured=True))

    method, url, kwargs = client.calls[0]
    assert method == "GET"
    assert url == "http://api.test/api/listings"
    assert kwargs["timeout"] == client.timeout
    assert kwargs["params"]["minPrice"] == 500000
    assert kwargs["params"]["pageSize"] == 6
    assert kwargs["params"]["isFeatured"] == "true"
    assert "maxPrice" not in kwargs["params"]
    assert result.total_count == 1
    assert result.items[0].property_type == "Condo"


def test_featured_listings_use_search_endpoint(monkeypatch):
    envelope = {"success": True, "data": [LISTING], "message": "Found 1 listings", "errors": []}
    client = _client(monkeypatch, lambda *a, **k: _response(200, envelope))
    featured = client.get_featured_listings()
    _, url, kwargs = client.calls[0]
    assert url.endswith("/api/listings/search")
    assert kwargs["params"]["isFeatured"] == "true"
    assert kwargs["params"]["sortBy"] == "createdAt"
    assert "page" not in kwargs["params"]
    assert [prop.id for prop in featured] == [3]


def test_application_error_carries_envelope_details(monkeypatch):
    envelope = {
        "success": False,
        "data": None,
        "message": "Listing not found",
        "errors": ["No listing found with ID 99"],
    }
    client = _client(monkeypatch, lambda *a, **k: _response(404, envelope))
    with pytest.raises(ApiError) as excinfo:
        client.get_listing(99)
    assert excinfo.value.status == 404
    assert excinfo.value.message == "Listing not found"
    assert excinfo.value.errors == ["No listing found with ID 99"]


def test_timeout_is_reported_separately(monkeypatch):
    def handler(*args, **kwargs):
        raise requests.Timeout("slow")

    client = _client(monkeypatch, handler)
    with pytest.raises(ApiError) as excinfo:
        client.get_listings()
    assert excinfo.value.status == 0
    assert excinfo.value.message == TIMEOUT_MESSAGE


def test_connection_failure(monkeypatch):
    def handler(*args, **kwargs):
        raise requests.ConnectionError("refused")

    client = _client(monkeypatch, handler)
    with pytest.raises(ApiError) as excinfo:
        client.search_listings()
    assert excinfo.value.status == 0
    assert excinfo.value.message == CONNECTION_MESSAGE
    assert len(client.calls) == 1


def test_create_posts_camel_case_body(monkeypatch):
    envelope = {"success": True, "data": dict(LISTING, id=13), "message": "Listing created successfully", "errors": []}
    client = _client(monkeypatch, lambda *a, **k: _response(201, envelope))
    created = client.create_listing(PropertyDraft(title="Luxury Waterfront Condo", is_featured=True))
    method, url, kwargs = client.calls[0]
    assert method == "POST"
    assert kwargs["json"]["isFeatured"] is True
    assert "is_featured" not in kwargs["json"]
    assert created.id == 13


def test_local_mode_uses_in_process_service():
    reset_repository()
    client = BackendClient(base_url="http://unused.test", use_api=False)
    page = client.get_listings(FilterCriteria(page_size=5))
    assert page.total_count == 12
    assert len(page.items) == 5
    assert [prop.id for prop in client.get_featured_listings()] == [3, 2, 1]
    with pytest.raises(ApiError) as excinfo:
        client.get_listing(999)
    assert excinfo.value.status == 404
    reset_repository()
