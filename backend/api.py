import functools
from pathlib import Path
from typing import Any, Callable, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from .db.repo import get_repository
from .models.property import DEFAULT_PAGE_SIZE, ApiResponse, FilterCriteria, PropertyDraft
from .services.listing_service import ListingService
from .utils.coerce import to_bool, to_float, to_int
from .utils.logging import get_logger

LOGGER = get_logger("api")

app = FastAPI(title="Property Listings API")
router = APIRouter(prefix="/api")


def _respond(data: Any = None, message: str = "", status_code: int = 200) -> JSONResponse:
    envelope = ApiResponse[Any](success=True, data=jsonable_encoder(data), message=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))


def _fail(status_code: int, message: str, errors: Optional[List[str]] = None) -> JSONResponse:
    envelope = ApiResponse[Any](success=False, data=None, message=message, errors=errors or [])
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))


def _invalid_id() -> JSONResponse:
    return _fail(400, "Invalid listing ID", ["Listing ID must be greater than 0"])


def _not_found(listing_id: int) -> JSONResponse:
    return _fail(404, "Listing not found", [f"No listing found with ID {listing_id}"])


def handles_errors(action: str) -> Callable:
    """Turn unexpected failures inside a route into a 500 envelope."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                LOGGER.exception("Error %s", action)
                return _fail(500, f"An error occurred while {action}", [str(exc)])

        return wrapper

    return decorator


@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = exc.errors()
    if any(problem.get("loc", ("",))[0] == "path" for problem in problems):
        return _invalid_id()
    errors = []
    for problem in problems:
        location = ".".join(str(part) for part in problem.get("loc", ()) if part != "body")
        errors.append(f"{location}: {problem.get('msg')}" if location else str(problem.get("msg")))
    return _fail(400, "Invalid listing data", errors)


def get_listing_service() -> ListingService:
    return ListingService(get_repository())


def listing_criteria(
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    min_bedrooms: Optional[str] = Query(None, alias="minBedrooms"),
    max_bedrooms: Optional[str] = Query(None, alias="maxBedrooms"),
    min_bathrooms: Optional[str] = Query(None, alias="minBathrooms"),
    max_bathrooms: Optional[str] = Query(None, alias="maxBathrooms"),
    min_sqft: Optional[str] = Query(None, alias="minSqft"),
    max_sqft: Optional[str] = Query(None, alias="maxSqft"),
    property_type: Optional[str] = Query(None, alias="propertyType"),
    status: Optional[str] = Query(None),
    is_featured: Optional[str] = Query(None, alias="isFeatured"),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    sort_by: Optional[str] = Query("createdAt", alias="sortBy"),
    sort_order: Optional[str] = Query("desc", alias="sortOrder"),
) -> FilterCriteria:
    """Build criteria from query params, ignoring values that do not parse."""

    page_number = to_int(page)
    size = to_int(page_size)
    criteria = FilterCriteria(
        page=1 if page_number is None else page_number,
        page_size=DEFAULT_PAGE_SIZE if size is None else size,
        min_price=to_float(min_price),
        max_price=to_float(max_price),
        min_bedrooms=to_int(min_bedrooms),
        max_bedrooms=to_int(max_bedrooms),
        min_bathrooms=to_int(min_bathrooms),
        max_bathrooms=to_int(max_bathrooms),
        min_sqft=to_int(min_sqft),
        max_sqft=to_int(max_sqft),
        property_type=property_type or None,
        status=status or None,
        is_featured=to_bool(is_featured),
        search_term=search_term or None,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return criteria.normalized()


@router.get("/listings")
@handles_errors("retrieving listings")
def list_listings(
    criteria: FilterCriteria = Depends(listing_criteria),
    service: ListingService = Depends(get_listing_service),
):
    result = service.get_listings(criteria)
    return _respond(result, "Listings retrieved successfully")


@router.get("/listings/search")
@handles_errors("searching listings")
def search_listings(
    criteria: FilterCriteria = Depends(listing_criteria),
    service: ListingService = Depends(get_listing_service),
):
    listings = service.search_listings(criteria)
    return _respond(listings, f"Found {len(listings)} listings matching your criteria")


@router.get("/listings/featured")
@handles_errors("retrieving featured listings")
def featured_listings(service: ListingService = Depends(get_listing_service)):
    listings = service.get_featured_listings()
    return _respond(listings, "Featured listings retrieved successfully")


@router.get("/listings/{listing_id}")
@handles_errors("retrieving the listing")
def get_listing(listing_id: int, service: ListingService = Depends(get_listing_service)):
    if listing_id <= 0:
        return _invalid_id()
    listing = service.get_listing(listing_id)
    if listing is None:
        return _not_found(listing_id)
    return _respond(listing, "Listing retrieved successfully")


@router.post("/listings")
@handles_errors("creating the listing")
def create_listing(
    draft: PropertyDraft = Body(...),
    service: ListingService = Depends(get_listing_service),
):
    created = service.create_listing(draft)
    return _respond(created, "Listing created successfully", status_code=201)


@router.put("/listings/{listing_id}")
@handles_errors("updating the listing")
def update_listing(
    listing_id: int,
    draft: PropertyDraft = Body(...),
    service: ListingService = Depends(get_listing_service),
):
    if listing_id <= 0:
        return _invalid_id()
    updated = service.update_listing(listing_id, draft)
    if updated is None:
        return _not_found(listing_id)
    return _respond(updated, "Listing updated successfully")


@router.delete("/listings/{listing_id}")
@handles_errors("deleting the listing")
def delete_listing(listing_id: int, service: ListingService = Depends(get_listing_service)):
    if listing_id <= 0:
        return _invalid_id()
    if not service.delete_listing(listing_id):
        return _not_found(listing_id)
    return _respond(None, "Listing deleted successfully")


@router.get("/health")
def health():
    return {"status": "ok"}


app.include_router(router)
