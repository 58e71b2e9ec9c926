"""Project Repository — SQLAlchemy implementation of ProjectRepository.

Invariants:
    - One repository per request, wrapping that request's AsyncSession
    - Every returned Project has exactly the associations its DTO reads loaded
      (relationships are lazy="raise": a missing eager load fails loudly)
    - Language lookups match iso_code case-sensitively
    - Project ids outside the INTEGER key range resolve to None without a query

Design Decisions:
    - Load options declared once per DTO shape (SUMMARY_LOAD, DETAIL_LOAD) so active and
      archived listings load identically
    - populate_existing on single-project loads: re-reads after commit refresh rows already
      in the identity map
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from translation_api.core.domain_types import IsoCode, ProjectId
from translation_api.models import Identifier, Language, Project, Translation

logger = logging.getLogger(__name__)

# Range of the INTEGER primary key columns
MIN_ROW_ID = -2**31
MAX_ROW_ID = 2**31 - 1

SUMMARY_LOAD = (
    selectinload(Project.base_language),
    selectinload(Project.languages),
)

DETAIL_LOAD = SUMMARY_LOAD + (
    selectinload(Project.identifiers)
    .selectinload(Identifier.translations)
    .selectinload(Translation.language),
)


class SqlProjectRepository:
    """Project persistence over one async session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_projects(self) -> Sequence[Project]:
        result = await self.db.execute(
            select(Project).options(*SUMMARY_LOAD).order_by(Project.id),
        )
        return result.scalars().all()

    async def get_project(self, project_id: ProjectId) -> Project | None:
        if not MIN_ROW_ID <= project_id <= MAX_ROW_ID:
            return None
        result = await self.db.execute(
            select(Project)
            .where(Project.id == project_id)
            .options(*DETAIL_LOAD)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def name_exists(self, name: str) -> bool:
        result = await self.db.execute(
            select(Project.id).where(Project.name == name).limit(1),
        )
        return result.first() is not None

    async def get_language(self, iso_code: IsoCode) -> Language | None:
        result = await self.db.execute(
            select(Language).where(Language.iso_code == iso_code),
        )
        return result.scalar_one_or_none()

    def add(self, entity) -> None:
        self.db.add(entity)

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
