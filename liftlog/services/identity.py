"""Identity resolver: external subject id -> internal User."""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.security import get_external_subject
from liftlog.db.session import get_db
from liftlog.models.user import User

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Looks up the internal user for a verified external identity.

    A subject with no users row is not an error: callers treat it as a user
    with no data.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, external_id: str) -> User | None:
        if not external_id:
            return None
        result = await self.db.execute(select(User).where(User.external_id == external_id))
        return result.scalar_one_or_none()

    async def resolve_user_id(self, external_id: str) -> int | None:
        if not external_id:
            return None
        result = await self.db.execute(select(User.id).where(User.external_id == external_id))
        user_id = result.scalar_one_or_none()
        if user_id is None:
            logger.debug("No provisioned user for subject; treating as empty")
        return user_id


async def get_current_user_id(
    subject: str = Depends(get_external_subject),
    db: AsyncSession = Depends(get_db),
) -> int | None:
    """Dependency: internal id of the authenticated caller, or None if not provisioned."""
    return await IdentityResolver(db).resolve_user_id(subject)
