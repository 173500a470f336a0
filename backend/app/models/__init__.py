"""SQLAlchemy models for the store admin API."""

from app.models.store import Store
from app.models.banner import Banner
from app.models.category import Category
from app.models.product import Product
from app.models.image import Image

__all__ = [
    "Store",
    "Banner",
    "Category",
    "Product",
    "Image",
]
