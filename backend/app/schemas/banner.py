"""Banner schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.common import APIModel


class BannerInput(APIModel):
    label: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field(..., min_length=1, max_length=1000)


class BannerResponse(APIModel):
    id: UUID
    store_id: UUID
    label: str
    image_url: str
    created_at: datetime
    updated_at: datetime
