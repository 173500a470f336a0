"""Product schemas for API request/response."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.category import CategoryResponse
from app.schemas.common import APIModel

OPTIONAL_TEXT_FIELDS = (
    "description",
    "active_ingredients",
    "net_weight",
    "manufacturer",
    "shelf_life",
    "packaging",
)


class ImageInput(APIModel):
    url: str = Field(..., min_length=1, max_length=1000)


class ProductInput(APIModel):
    """Full product payload, used for both create and replace.

    Blank optional text becomes None and missing flags become False, so the
    stored row never depends on what the client happened to omit.
    """

    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    category_id: UUID
    images: list[ImageInput] = Field(..., min_length=1)
    is_featured: bool = False
    is_archived: bool = False
    description: str | None = None
    active_ingredients: str | None = None
    net_weight: str | None = Field(None, max_length=100)
    manufacturer: str | None = Field(None, max_length=255)
    shelf_life: str | None = Field(None, max_length=100)
    packaging: str | None = Field(None, max_length=255)

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("is_featured", "is_archived", mode="before")
    @classmethod
    def _null_flag_to_false(cls, value):
        return False if value is None else value

    @field_validator("images", mode="before")
    @classmethod
    def _accept_bare_urls(cls, value):
        # The dashboard sends [{"url": ...}]; other clients send plain strings
        if isinstance(value, list):
            return [{"url": item} if isinstance(item, str) else item for item in value]
        return value

    def scalar_fields(self) -> dict:
        """Column values for the products row (everything except images)."""
        return self.model_dump(exclude={"images"})

    @property
    def image_urls(self) -> list[str]:
        return [image.url for image in self.images]


class ImageResponse(APIModel):
    id: UUID
    product_id: UUID
    url: str
    created_at: datetime
    updated_at: datetime


class ProductResponse(APIModel):
    id: UUID
    store_id: UUID
    category_id: UUID
    name: str
    price: Decimal
    is_featured: bool
    is_archived: bool
    description: str | None = None
    active_ingredients: str | None = None
    net_weight: str | None = None
    manufacturer: str | None = None
    shelf_life: str | None = None
    packaging: str | None = None
    created_at: datetime
    updated_at: datetime
    images: list[ImageResponse]
    category: CategoryResponse
