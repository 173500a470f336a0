"""Store endpoints: create, rename, delete, and list the caller's stores."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_current_user_id, get_owned_store
from app.db.base import get_db
from app.models.store import Store
from app.schemas.product import ProductResponse
from app.schemas.store import StoreInput, StoreResponse
from app.services import products as product_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stores", tags=["stores"])


@router.get("", response_model=list[StoreResponse])
async def list_stores(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Stores owned by the caller, oldest first (store switcher)."""
    result = await db.execute(
        select(Store).where(Store.owner_id == user_id).order_by(Store.created_at)
    )
    return result.scalars().all()


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
async def create_store(
    body: StoreInput,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    store = Store(name=body.name, owner_id=user_id)
    db.add(store)
    await db.commit()
    await db.refresh(store)

    logger.info("Created store %s for user %s", store.id, user_id)
    return store


@router.get("/{store_id}", response_model=StoreResponse)
async def get_store(store: Store = Depends(get_owned_store)):
    return store


@router.get("/{store_id}/products", response_model=list[ProductResponse])
async def list_store_products(
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    """All products of the store for its owner, archived ones included."""
    return await product_service.list_store_products(db, store.id)


@router.patch("/{store_id}", response_model=StoreResponse)
async def update_store(
    body: StoreInput,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    store.name = body.name
    await db.commit()
    await db.refresh(store)

    logger.info("Renamed store %s", store.id)
    return store


@router.delete("/{store_id}", response_model=StoreResponse)
async def delete_store(
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    """Delete a store; banners, categories, products and images go with it."""
    deleted = StoreResponse.model_validate(store)
    await db.delete(store)
    await db.commit()

    logger.info("Deleted store %s", deleted.id)
    return deleted
