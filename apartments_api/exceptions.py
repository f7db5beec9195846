from typing import Optional

from fastapi import HTTPException, status


class ApiException(HTTPException):
    """Base class for errors rendered as {"error": ..., "errors": [...]}."""

    def __init__(self, status_code: int, detail: str, errors: Optional[list[str]] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.errors = errors


class NotFoundException(ApiException):
    """Resource not found exception (404)."""

    def __init__(self, detail: str):
        super().__init__(status.HTTP_404_NOT_FOUND, detail)


class BadRequestException(ApiException):
    """Client error exception (400)."""

    def __init__(self, detail: str, errors: Optional[list[str]] = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail, errors)


# ===== Apartment-specific Exceptions =====


class InvalidParameterException(BadRequestException):
    """A list query parameter could not be parsed or is out of range (400)."""

    def __init__(self, field: str, detail: str):
        super().__init__(detail)
        self.field = field


class RecordValidationException(BadRequestException):
    """One or more apartment fields are missing or invalid (400)."""

    def __init__(self, errors: list[str], detail: str = "Validation error"):
        super().__init__(detail, errors)


class DuplicateApartmentException(BadRequestException):
    """Project and unit number already taken (400)."""

    def __init__(
        self,
        detail: str = "An apartment with this project and unit number already exists",
    ):
        super().__init__(detail)


class ApartmentNotFoundException(NotFoundException):
    """No apartment with the requested id (404)."""

    def __init__(self, detail: str = "Apartment not found"):
        super().__init__(detail)
