"""Request Dependencies — store capability and caller identity for route handlers.

Invariants:
    - Each request gets its own AsyncSession (get_db) and its own repository/service
    - get_current_user raises UnauthorizedError when the session carries no known user
    - An authorized request carries the user id on request.state.user_id for logging
    - Nothing here keeps module-level state; tests swap any link via dependency_overrides

Design Decisions:
    - Identity comes from the signed session cookie written by the login collaborator;
      only the user_id key is read
"""

import logging

from fastapi import Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from translation_api.core.errors import UnauthorizedError
from translation_api.infrastructure.database import get_db
from translation_api.infrastructure.project_repository import SqlProjectRepository
from translation_api.models import User
from translation_api.services.manage_projects import ProjectService

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


def get_project_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlProjectRepository:
    return SqlProjectRepository(db)


def get_project_service(
    repository: SqlProjectRepository = Depends(get_project_repository),
) -> ProjectService:
    return ProjectService(repository)


async def get_current_user(
    request: Request, db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the logged-in user or reject the request with 401."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        raise UnauthorizedError()
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        logger.warning(
            f"Session references unknown user {user_id}", extra={"user_id": user_id},
        )
        raise UnauthorizedError()
    request.state.user_id = user.id
    logger.debug(
        f"Request authorized for user {user.id}",
        extra={"user_id": user.id, "path": request.url.path},
    )
    return user
