"""Sample listings inserted into an empty apartments table on startup."""

import logging
from decimal import Decimal

from sqlmodel.ext.asyncio.session import AsyncSession

from apartments_api.models import Apartment, ApartmentStatus
from apartments_api.services.apartment_service import ApartmentService

logger = logging.getLogger(__name__)

SAMPLE_APARTMENTS = [
    {
        "project": "Palm Hills",
        "unit_name": "A-101",
        "unit_number": "101",
        "price": Decimal("1500000"),
        "area": Decimal("120"),
        "city": "Cairo",
        "description": "Luxurious apartment with garden view in a prime location",
        "status": ApartmentStatus.AVAILABLE.value,
    },
    {
        "project": "Madinaty",
        "unit_name": "B-205",
        "unit_number": "205",
        "price": Decimal("2200000"),
        "area": Decimal("150"),
        "city": "Cairo",
        "description": "Spacious apartment with modern finishes and balcony",
        "status": ApartmentStatus.AVAILABLE.value,
    },
    {
        "project": "Zayed Dunes",
        "unit_name": "C-302",
        "unit_number": "302",
        "price": Decimal("1800000"),
        "area": Decimal("135"),
        "city": "Giza",
        "description": "Contemporary design with smart home features",
        "status": ApartmentStatus.SOLD.value,
    },
    {
        "project": "North Edge Towers",
        "unit_name": "D-410",
        "unit_number": "410",
        "price": Decimal("3000000"),
        "area": Decimal("180"),
        "city": "Alexandria",
        "description": "Premium penthouse with sea view and private terrace",
        "status": ApartmentStatus.RESERVED.value,
    },
    {
        "project": "Palm Hills",
        "unit_name": "E-102",
        "unit_number": "102",
        "price": Decimal("1350000"),
        "area": Decimal("110"),
        "city": "Cairo",
        "description": "Cozy apartment perfect for small families",
        "status": ApartmentStatus.AVAILABLE.value,
    },
]


async def seed_apartments(session: AsyncSession) -> int:
    """Insert the sample apartments if the table is empty.

    Returns:
        Number of apartments inserted (0 when the table already has rows)
    """
    existing = await ApartmentService(Apartment).count(session)
    if existing:
        logger.info(f"Database already has {existing} apartment(s). Skipping seed.")
        return 0

    logger.info("Seeding apartments...")
    session.add_all([Apartment(**row) for row in SAMPLE_APARTMENTS])
    await session.commit()
    logger.info(f"Seeded {len(SAMPLE_APARTMENTS)} sample apartments.")
    return len(SAMPLE_APARTMENTS)
