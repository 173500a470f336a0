"""Product queries and the create/replace/delete routines.

Services only flush; the route handler owns the commit, so everything a
routine writes lands in a single transaction that is rolled back if any step
fails.
"""

import logging
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import InvalidInput, NotFound
from app.models.category import Category
from app.models.image import Image
from app.models.product import Product
from app.schemas.product import ProductInput
from app.services.ownership import assert_belongs_to_store

logger = logging.getLogger(__name__)


def _escape_like(s: str) -> str:
    """Escape SQL LIKE wildcards in user input."""
    return s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _with_relations(query):
    return query.options(selectinload(Product.images), selectinload(Product.category))


async def get_product(
    db: AsyncSession, store_id: UUID, product_id: UUID, *, refresh: bool = False
) -> Product:
    query = _with_relations(
        select(Product).where(Product.id == product_id, Product.store_id == store_id)
    )
    if refresh:
        query = query.execution_options(populate_existing=True)
    product = (await db.execute(query)).scalar_one_or_none()
    if product is None:
        raise NotFound("Product not found")
    return product


async def list_products(
    db: AsyncSession,
    store_id: UUID | None,
    category_id: UUID | None = None,
    is_featured: bool | None = None,
    query: str | None = None,
    global_: bool = False,
) -> list[Product]:
    """Public product listing. Archived products are never returned."""
    stmt = select(Product).where(Product.is_archived.is_(False))

    if not global_:
        stmt = stmt.where(Product.store_id == store_id)
    if category_id is not None:
        stmt = stmt.where(Product.category_id == category_id)
    if is_featured is True:
        stmt = stmt.where(Product.is_featured.is_(True))
    if query:
        like = f"%{_escape_like(query)}%"
        stmt = stmt.join(Category, Product.category_id == Category.id).where(
            or_(
                Product.name.ilike(like, escape="\\"),
                Product.description.ilike(like, escape="\\"),
                Product.manufacturer.ilike(like, escape="\\"),
                Category.name.ilike(like, escape="\\"),
            )
        )

    stmt = _with_relations(stmt).order_by(Product.created_at.desc())
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_store_products(db: AsyncSession, store_id: UUID) -> list[Product]:
    """Every product of a store, archived ones included (owner dashboard)."""
    stmt = _with_relations(select(Product).where(Product.store_id == store_id))
    result = await db.execute(stmt.order_by(Product.created_at.desc()))
    return list(result.scalars().all())


def _validate(data: ProductInput) -> None:
    if not data.images:
        raise InvalidInput("At least one image is required")


async def create_product(db: AsyncSession, store_id: UUID, data: ProductInput) -> Product:
    _validate(data)
    await assert_belongs_to_store(db, Category, data.category_id, store_id)

    product = Product(store_id=store_id, **data.scalar_fields())
    db.add(product)
    await db.flush()
    db.add_all(Image(product_id=product.id, url=url) for url in data.image_urls)
    await db.flush()

    logger.info("Created product %s in store %s", product.id, store_id)
    return await get_product(db, store_id, product.id, refresh=True)


async def replace_product(
    db: AsyncSession, store_id: UUID, product_id: UUID, data: ProductInput
) -> Product:
    """Overwrite every field of a product and swap its whole image set.

    Old images are deleted and new rows inserted; image ids are not kept
    across an edit.
    """
    _validate(data)
    await assert_belongs_to_store(db, Category, data.category_id, store_id)
    product = await get_product(db, store_id, product_id)

    await db.execute(delete(Image).where(Image.product_id == product.id))

    for field, value in data.scalar_fields().items():
        setattr(product, field, value)
    await db.flush()

    db.add_all(Image(product_id=product.id, url=url) for url in data.image_urls)
    await db.flush()

    logger.info(
        "Replaced product %s in store %s with %d image(s)",
        product.id, store_id, len(data.images),
    )
    return await get_product(db, store_id, product.id, refresh=True)


async def delete_product(db: AsyncSession, store_id: UUID, product_id: UUID) -> Product:
    product = await get_product(db, store_id, product_id)
    await db.delete(product)
    await db.flush()
    logger.info("Deleted product %s from store %s", product_id, store_id)
    return product
