import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from apartments_api.exceptions import ApartmentNotFoundException, DuplicateApartmentException
from apartments_api.models import UNIQUE_UNIT_CONSTRAINT, Apartment, ApartmentCreate
from apartments_api.schemas.common import PageMeta
from apartments_api.services.base import BaseCRUDService
from apartments_api.services.listing_query import (
    ListingQuerySpec,
    build_filters,
    build_ordering,
    build_page_meta,
)

logger = logging.getLogger(__name__)

# PostgreSQL names the constraint; SQLite only lists its columns.
DUPLICATE_UNIT_MARKERS = (
    UNIQUE_UNIT_CONSTRAINT,
    "UNIQUE constraint failed: apartments.project, apartments.unit_number",
)


def is_duplicate_unit_violation(exc: IntegrityError) -> bool:
    """True if the error comes from the (project, unit_number) unique constraint."""
    error_msg = str(exc.orig) if exc.orig else str(exc)
    return any(marker in error_msg for marker in DUPLICATE_UNIT_MARKERS)


class ApartmentService(BaseCRUDService[Apartment]):
    """Apartment listing queries and creation."""

    async def list_apartments(
        self,
        session: AsyncSession,
        spec: ListingQuerySpec,
    ) -> tuple[List[Apartment], PageMeta]:
        """Get one page of apartments for a validated listing spec.

        Pages past the end come back empty; meta still reflects the full
        filtered count.
        """
        items, total = await self.find(
            session,
            where=build_filters(spec),
            order_by=build_ordering(spec.sort),
            offset=spec.offset,
            limit=spec.page_size,
        )
        return items, build_page_meta(spec, total)

    async def get_by_id(self, session: AsyncSession, id: int) -> Apartment:
        apartment = await self.get(session, id)
        if apartment is None:
            raise ApartmentNotFoundException()
        return apartment

    async def create_apartment(
        self,
        session: AsyncSession,
        data: ApartmentCreate,
    ) -> Apartment:
        """Insert a validated apartment.

        Raises:
            DuplicateApartmentException: If (project, unit_number) is taken
            IntegrityError: For any other constraint violation
        """
        apartment = Apartment.model_validate(data)
        try:
            created = await self.create(session, apartment)
        except IntegrityError as e:
            await session.rollback()
            if not is_duplicate_unit_violation(e):
                raise
            logger.warning(
                f"Duplicate apartment rejected: project={data.project!r} "
                f"unit_number={data.unit_number!r} ({e.orig})"
            )
            raise DuplicateApartmentException() from e

        logger.info(f"Created apartment {created.id} ({created.project} / {created.unit_number})")
        return created
