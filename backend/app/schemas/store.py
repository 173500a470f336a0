"""Store schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.common import APIModel


class StoreInput(APIModel):
    name: str = Field(..., min_length=1, max_length=255)


class StoreResponse(APIModel):
    id: UUID
    name: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
