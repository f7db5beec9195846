from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, Index, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class ApartmentStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    RESERVED = "reserved"


APARTMENT_STATUSES = tuple(s.value for s in ApartmentStatus)

MAX_TEXT_LENGTH = 255
UNIQUE_UNIT_CONSTRAINT = "unique_project_unit_number"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ===== Apartment =====
class Apartment(SQLModel, table=True):
    __tablename__ = "apartments"
    __table_args__ = (
        UniqueConstraint("project", "unit_number", name=UNIQUE_UNIT_CONSTRAINT),
        CheckConstraint("price > 0", name="apartments_price_positive"),
        CheckConstraint("area > 0", name="apartments_area_positive"),
        CheckConstraint(
            "status IN ('available', 'sold', 'reserved')",
            name="apartments_status_check",
        ),
        # Listing queries sort by these
        Index("idx_apartments_created_at", "created_at"),
        Index("idx_apartments_price", "price"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    project: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    unit_name: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    unit_number: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    area: Decimal = Field(max_digits=10, decimal_places=2)
    city: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    status: str = Field(default=ApartmentStatus.AVAILABLE.value, max_length=20)
    created_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False
    )


# ===== Create Schema =====
class ApartmentCreate(SQLModel):
    """Validated input for a new apartment. Built by validate_apartment_input."""
    project: str
    unit_name: str
    unit_number: str
    price: Decimal
    area: Decimal
    city: str
    description: Optional[str] = None
    status: str = ApartmentStatus.AVAILABLE.value
