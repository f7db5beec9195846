"""
Listing query pipeline for GET /api/apartments.

parse_listing_query turns raw query strings into a ListingQuerySpec, stopping
at the first bad parameter. The build_* helpers turn a ListingQuerySpec into SQL clauses
and pagination metadata for ApartmentService.list_apartments.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import ColumnElement, or_
from sqlmodel import col

from apartments_api.config import settings
from apartments_api.exceptions import InvalidParameterException
from apartments_api.models import Apartment
from apartments_api.schemas.common import PageMeta

DEFAULT_PAGE = 1


class SortMode(str, Enum):
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


class ListingQuerySpec(BaseModel):
    """Validated filters, sort and page for an apartment listing."""

    model_config = ConfigDict(frozen=True)

    search: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    sort: SortMode = SortMode.NEWEST
    page: int = DEFAULT_PAGE
    page_size: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


# ===== Validation =====


def _parse_positive_int(raw: str) -> Optional[int]:
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= 1 else None


def _parse_number(raw: str) -> Optional[Decimal]:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _parse_sort(raw: Optional[str]) -> SortMode:
    # Unknown sort values fall back to newest instead of failing the request.
    try:
        return SortMode(raw)
    except ValueError:
        return SortMode.NEWEST


def parse_listing_query(
    params: Mapping[str, Optional[str]],
    default_page_size: Optional[int] = None,
) -> ListingQuerySpec:
    """Validate raw listing query parameters.

    Args:
        params: Raw query values keyed by parameter name; missing keys and
            None both mean "not given"
        default_page_size: Page size used when page_size is absent; falls
            back to settings.DEFAULT_PAGE_SIZE

    Returns:
        ListingQuerySpec with defaults applied

    Raises:
        InvalidParameterException: On the first invalid page, page_size,
            min_price or max_price (checked in that order)
    """
    page = DEFAULT_PAGE
    raw_page = params.get("page")
    if raw_page is not None:
        page = _parse_positive_int(raw_page)
        if page is None:
            raise InvalidParameterException(
                "page", "Invalid page parameter. Must be a positive integer."
            )

    page_size = default_page_size or settings.DEFAULT_PAGE_SIZE
    raw_page_size = params.get("page_size")
    if raw_page_size is not None:
        page_size = _parse_positive_int(raw_page_size)
        if page_size is None:
            raise InvalidParameterException(
                "page_size", "Invalid page_size parameter. Must be a positive integer."
            )

    prices: dict[str, Optional[Decimal]] = {}
    for field in ("min_price", "max_price"):
        raw = params.get(field)
        prices[field] = None
        if raw:
            prices[field] = _parse_number(raw)
            if prices[field] is None:
                raise InvalidParameterException(
                    field, f"Invalid {field} parameter. Must be a number."
                )

    search = params.get("search")

    return ListingQuerySpec(
        search=search if isinstance(search, str) and search else None,
        min_price=prices["min_price"],
        max_price=prices["max_price"],
        sort=_parse_sort(params.get("sort")),
        page=page,
        page_size=page_size,
    )


# ===== Query building =====


def build_filters(spec: ListingQuerySpec) -> list[ColumnElement[bool]]:
    """WHERE clauses for the filters that are set; the caller ANDs them together."""
    clauses: list[ColumnElement[bool]] = []

    if spec.search is not None:
        clauses.append(
            or_(
                col(Apartment.project).icontains(spec.search, autoescape=True),
                col(Apartment.unit_name).icontains(spec.search, autoescape=True),
                col(Apartment.unit_number).icontains(spec.search, autoescape=True),
            )
        )
    if spec.min_price is not None:
        clauses.append(col(Apartment.price) >= spec.min_price)
    if spec.max_price is not None:
        clauses.append(col(Apartment.price) <= spec.max_price)

    return clauses


def build_ordering(sort: SortMode) -> list:
    """ORDER BY columns for a sort mode, with id as the final tie breaker."""
    if sort is SortMode.PRICE_ASC:
        primary = col(Apartment.price).asc()
    elif sort is SortMode.PRICE_DESC:
        primary = col(Apartment.price).desc()
    else:
        primary = col(Apartment.created_at).desc()
    return [primary, col(Apartment.id).asc()]


def build_page_meta(spec: ListingQuerySpec, total: int) -> PageMeta:
    return PageMeta(
        page=spec.page,
        page_size=spec.page_size,
        total=total,
        total_pages=(total + spec.page_size - 1) // spec.page_size,
    )
