"""Store-ownership guard and same-store reference checks shared by every mutating route."""

import logging
from typing import TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import Forbidden, InvalidReference, Unauthenticated
from app.db.base import Base
from app.models.store import Store

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def assert_owns_store(db: AsyncSession, user_id: str | None, store_id: UUID) -> Store:
    """Return the store if `user_id` owns it.

    A missing store and somebody else's store both raise Forbidden, so callers
    cannot probe which store ids exist.
    """
    if not user_id:
        raise Unauthenticated()

    result = await db.execute(
        select(Store).where(Store.id == store_id, Store.owner_id == user_id)
    )
    store = result.scalar_one_or_none()
    if store is None:
        logger.warning("User %s denied access to store %s", user_id, store_id)
        raise Forbidden()
    return store


async def assert_belongs_to_store(
    db: AsyncSession, model: type[ModelT], entity_id: UUID, store_id: UUID
) -> ModelT:
    """Return the `model` row with `entity_id` if it lives in `store_id`.

    Raises InvalidReference (400): the bad id comes from the request body, not
    the resource path.
    """
    result = await db.execute(
        select(model).where(model.id == entity_id, model.store_id == store_id)
    )
    entity = result.scalar_one_or_none()
    if entity is None:
        raise InvalidReference(f"{model.__name__} {entity_id} not found in this store")
    return entity
