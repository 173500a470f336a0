"""Category CRUD endpoints scoped to a store."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_owned_store
from app.core.exceptions import Conflict, NotFound
from app.db.base import get_db
from app.models.banner import Banner
from app.models.category import Category
from app.models.product import Product
from app.models.store import Store
from app.schemas.category import (
    CategoryInput,
    CategoryResponse,
    CategoryDetailResponse,
)
from app.services.ownership import assert_belongs_to_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/{store_id}/categories", tags=["categories"])


async def _get_category(db: AsyncSession, store_id: UUID, category_id: UUID) -> Category:
    result = await db.execute(
        select(Category).where(
            Category.id == category_id,
            Category.store_id == store_id,
        )
    )
    category = result.scalar_one_or_none()
    if not category:
        raise NotFound("Category not found")
    return category


@router.get("", response_model=list[CategoryDetailResponse])
async def list_categories(store_id: UUID, db: AsyncSession = Depends(get_db)):
    """List all categories of a store with their banners, newest first."""
    result = await db.execute(
        select(Category)
        .where(Category.store_id == store_id)
        .order_by(Category.created_at.desc())
    )
    return result.scalars().all()


@router.get("/{category_id}", response_model=CategoryDetailResponse)
async def get_category(
    store_id: UUID,
    category_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await _get_category(db, store_id, category_id)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryInput,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    """Create a category; its banner must belong to the same store."""
    await assert_belongs_to_store(db, Banner, body.banner_id, store.id)

    category = Category(**body.model_dump(), store_id=store.id)
    db.add(category)
    await db.commit()
    await db.refresh(category)

    logger.info("Created category %s in store %s", category.id, store.id)
    return category


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: UUID,
    body: CategoryInput,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    await assert_belongs_to_store(db, Banner, body.banner_id, store.id)
    category = await _get_category(db, store.id, category_id)

    for field, value in body.model_dump().items():
        setattr(category, field, value)

    await db.commit()
    await db.refresh(category)
    return category


@router.delete("/{category_id}", response_model=CategoryResponse)
async def delete_category(
    category_id: UUID,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    """Delete a category. Refused while products still reference it."""
    category = await _get_category(db, store.id, category_id)

    products_count = await db.execute(
        select(func.count()).select_from(Product).where(Product.category_id == category.id)
    )
    if products_count.scalar_one() > 0:
        raise Conflict("Cannot delete category with existing products")

    deleted = CategoryResponse.model_validate(category)
    await db.delete(category)
    await db.commit()

    logger.info("Deleted category %s from store %s", category_id, store.id)
    return deleted
