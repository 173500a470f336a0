"""Dependency injection: caller identity and store-ownership enforcement."""

import logging
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import Unauthenticated
from app.core.security import decode_access_token
from app.db.base import get_db
from app.models.store import Store
from app.services.ownership import assert_owns_store

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Resolve the caller id from the bearer token. Raises 401 when absent or invalid."""
    if credentials is None:
        raise Unauthenticated()
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        logger.warning("Rejected bearer token")
        raise Unauthenticated("Could not validate credentials")
    user_id = payload.get("sub")
    if not user_id:
        raise Unauthenticated("Could not validate credentials")
    return str(user_id)


async def get_owned_store(
    store_id: UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> Store:
    """Resolve `{store_id}` from the path and require the caller to own it."""
    return await assert_owns_store(db, user_id, store_id)
