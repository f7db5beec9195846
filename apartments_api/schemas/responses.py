from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer

# Numeric(10, 2) columns come back as Decimal; clients expect JSON numbers.
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


# ===== Apartment Response =====
class ApartmentResponse(BaseModel):
    """Apartment response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    project: str
    unit_name: str
    unit_number: str
    price: JsonDecimal
    area: JsonDecimal
    city: str
    description: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime
