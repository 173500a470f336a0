"""Category schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.banner import BannerResponse
from app.schemas.common import APIModel


class CategoryInput(APIModel):
    name: str = Field(..., min_length=1, max_length=255)
    banner_id: UUID


class CategoryResponse(APIModel):
    id: UUID
    store_id: UUID
    banner_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


class CategoryDetailResponse(CategoryResponse):
    banner: BannerResponse
