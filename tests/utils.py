"""
Test utility functions and assertions.

This module provides helper functions for common testing patterns:
- Response assertions (status codes, error messages, pagination)
- Database query helpers (counting)
- Data comparison utilities
"""

from typing import Optional, Type

from httpx import Response
from sqlalchemy import func, select
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession


# =============================================================================
# Response assertion helpers
# =============================================================================


def assert_status_code(response: Response, expected: int):
    """
    Assert that the response has the expected status code.

    Raises:
        AssertionError: If status code doesn't match
    """
    assert response.status_code == expected, (
        f"Expected status code {expected}, got {response.status_code}. "
        f"Response body: {response.text}"
    )


def assert_error_message(response: Response, status_code: int, message: str):
    """Assert an error response with the given status and "error" text."""
    assert_status_code(response, status_code)
    data = response.json()
    assert "error" in data, "Response does not contain 'error' field"
    assert data["error"] == message, (
        f"Expected error '{message}', got '{data['error']}'"
    )


def assert_pagination_structure(
    response: Response,
    expected_total: Optional[int] = None,
    expected_total_pages: Optional[int] = None,
):
    """
    Assert that the response has the {data, meta} pagination structure.

    Raises:
        AssertionError: If pagination structure is invalid
    """
    assert_status_code(response, 200)
    body = response.json()

    assert "data" in body, "Response missing 'data' field"
    assert "meta" in body, "Response missing 'meta' field"
    assert isinstance(body["data"], list), "'data' should be a list"

    meta = body["meta"]
    for field in ("page", "page_size", "total", "total_pages"):
        assert field in meta, f"Meta missing '{field}' field"
        assert isinstance(meta[field], int), f"'{field}' should be an integer"

    if expected_total is not None:
        assert meta["total"] == expected_total, (
            f"Expected total={expected_total}, got {meta['total']}"
        )
    if expected_total_pages is not None:
        assert meta["total_pages"] == expected_total_pages, (
            f"Expected total_pages={expected_total_pages}, got {meta['total_pages']}"
        )


# =============================================================================
# Database query helpers
# =============================================================================


async def count_records(session: AsyncSession, model_class: Type[SQLModel]) -> int:
    """Count the number of records for a given model."""
    result = await session.execute(select(func.count()).select_from(model_class))
    return result.scalar_one()


# =============================================================================
# Data comparison utilities
# =============================================================================


def assert_sorted_by(items: list[dict], field: str, descending: bool = False):
    """
    Assert that a list of items is sorted by a specific field.

    Raises:
        AssertionError: If list is not properly sorted
    """
    if len(items) < 2:
        return  # Nothing to check

    values = [item[field] for item in items]
    expected = sorted(values, reverse=descending)
    direction = "descending" if descending else "ascending"
    assert values == expected, (
        f"Items not sorted by '{field}' ({direction}). "
        f"Expected order: {expected}, got: {values}"
    )


def ids_of(response: Response) -> list[int]:
    return [item["id"] for item in response.json()["data"]]


def make_create_request(**overrides) -> dict:
    """Build a valid POST /api/apartments body, with overrides applied."""
    request = {
        "project": "Palm Hills",
        "unit_name": "A-101",
        "unit_number": "101",
        "price": 1500000,
        "area": 120,
        "city": "Cairo",
        "description": "Garden view",
    }
    request.update(overrides)
    return request
