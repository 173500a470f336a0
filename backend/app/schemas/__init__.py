from app.schemas.store import StoreInput, StoreResponse
from app.schemas.banner import BannerInput, BannerResponse
from app.schemas.category import (
    CategoryInput, CategoryResponse, CategoryDetailResponse,
)
from app.schemas.product import (
    ImageInput, ImageResponse, ProductInput, ProductResponse,
)

__all__ = [
    "StoreInput", "StoreResponse",
    "BannerInput", "BannerResponse",
    "CategoryInput", "CategoryResponse", "CategoryDetailResponse",
    "ImageInput", "ImageResponse", "ProductInput", "ProductResponse",
]
