from typing import Optional

from fastapi import Query

from apartments_api.services.listing_query import ListingQuerySpec, parse_listing_query


class ListingQueryParams:
    """Raw query parameters for the apartment listing endpoint.

    Values are taken as strings so parse_listing_query owns every check and
    its error messages.
    """

    def __init__(
        self,
        search: Optional[str] = Query(
            None, description="Case-insensitive match on project, unit_name or unit_number"
        ),
        min_price: Optional[str] = Query(None, description="Minimum price (inclusive)"),
        max_price: Optional[str] = Query(None, description="Maximum price (inclusive)"),
        sort: Optional[str] = Query(
            None, description="newest (default), price_asc or price_desc"
        ),
        page: Optional[str] = Query(None, description="Page number, starting at 1"),
        page_size: Optional[str] = Query(None, description="Items per page"),
    ):
        self.raw = {
            "search": search,
            "min_price": min_price,
            "max_price": max_price,
            "sort": sort,
            "page": page,
            "page_size": page_size,
        }

    def to_spec(self) -> ListingQuerySpec:
        return parse_listing_query(self.raw)
