"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for a full overwrite of an existing product.

Prices must be finite; names are at most 255 characters, the column width.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(max_length=255)
    price: float
    available: bool = True


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product updates.

    Every field is required: an update replaces ``name``, ``price`` and
    ``available`` together.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(max_length=255)
    price: float
    available: bool
