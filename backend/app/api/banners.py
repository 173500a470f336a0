"""Banner CRUD endpoints scoped to a store."""

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
from app.models.store import Store
from app.schemas.banner import BannerInput, BannerResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/{store_id}/banners", tags=["banners"])


async def _get_banner(db: AsyncSession, store_id: UUID, banner_id: UUID) -> Banner:
    result = await db.execute(
        select(Banner).where(Banner.id == banner_id, Banner.store_id == store_id)
    )
    banner = result.scalar_one_or_none()
    if not banner:
        raise NotFound("Banner not found")
    return banner


@router.get("", response_model=list[BannerResponse])
async def list_banners(store_id: UUID, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Banner).where(Banner.store_id == store_id).order_by(Banner.created_at.desc())
    )
    return result.scalars().all()


@router.get("/{banner_id}", response_model=BannerResponse)
async def get_banner(store_id: UUID, banner_id: UUID, db: AsyncSession = Depends(get_db)):
    return await _get_banner(db, store_id, banner_id)


@router.post("", response_model=BannerResponse, status_code=status.HTTP_201_CREATED)
async def create_banner(
    body: BannerInput,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    banner = Banner(**body.model_dump(), store_id=store.id)
    db.add(banner)
    await db.commit()
    await db.refresh(banner)

    logger.info("Created banner %s in store %s", banner.id, store.id)
    return banner


@router.patch("/{banner_id}", response_model=BannerResponse)
async def update_banner(
    banner_id: UUID,
    body: BannerInput,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    banner = await _get_banner(db, store.id, banner_id)
    for field, value in body.model_dump().items():
        setattr(banner, field, value)

    await db.commit()
    await db.refresh(banner)
    return banner


@router.delete("/{banner_id}", response_model=BannerResponse)
async def delete_banner(
    banner_id: UUID,
    store: Store = Depends(get_owned_store),
    db: AsyncSession = Depends(get_db),
):
    """Delete a banner. Refused while any category still points at it."""
    banner = await _get_banner(db, store.id, banner_id)

    in_use = await db.execute(
        select(func.count()).select_from(Category).where(Category.banner_id == banner.id)
    )
    if in_use.scalar_one() > 0:
        raise Conflict("Banner is used by one or more categories")

    deleted = BannerResponse.model_validate(banner)
    await db.delete(banner)
    await db.commit()

    logger.info("Deleted banner %s from store %s", banner_id, store.id)
    return deleted
