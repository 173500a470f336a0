"""Product endpoints. Public reads serve the storefront; writes require store ownership."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_owned_store
from app.db.base import get_db
from app.models.store import Store
from app.schemas.common import MessageResponse
from app.schemas.product import ProductInput, ProductResponse
from app.services import products as product_service

router = APIRouter(prefix="/api/{store_id}/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    store_id: UUID,
    category_id: UUID | None = Query(None, alias="categoryId"),
    is_featured: str | None = Query(None, alias="isFeatured"),
    q: str | None = Query(None, max_length=200),
    global_: str | None = Query(None, alias="global"),
    db: AsyncSession = Depends(get_db),
):
    """List non-archived products.

    Both flags count only when they are exactly the string "true": `global`
    drops the store filter and spans every store, `isFeatured` narrows to
    featured products. Any other value is ignored.
    """
    return await product_service.list_products(
        db,
        store_id,
        category_id=category_id,
        is_featured=is_featured == "true",
        query=q or None,
        global_=global_ == "true",
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(store_id: UUID, product_id: UUID, db: AsyncSession = Depends(get_db)):
    return await product_service.get_product(db, store_id, product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductInput,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    product = await product_service.create_product(db, store.id, body)
    await db.commit()
    return product


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    body: ProductInput,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    """Replace every field and the full image set of a product."""
    product = await product_service.replace_product(db, store.id, product_id, body)
    await db.commit()
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: UUID,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    await product_service.delete_product(db, store.id, product_id)
    await db.commit()
    return MessageResponse(message="Product deleted")
