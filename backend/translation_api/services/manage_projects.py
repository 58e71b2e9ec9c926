"""Project Management — list, read, create, rename, archive, and language assignment.

Invariants:
    - Every operation reaches the store only through the injected ProjectRepository
    - Missing project or language -> ResourceNotFoundError (logged, answered with empty 404)
    - Duplicate name on create, duplicate language on add -> ConflictError
    - After a mutation the project is re-read with DETAIL associations before returning
    - base_language is always a member of languages after create and set_base_language

Design Decisions:
    - rename performs no uniqueness check: duplicate names through rename are allowed
    - add_language checks membership before resolving the ISO code: an attached code
      answers 409 even though the lookup would also succeed
    - IntegrityError on commit: duplicate project_languages row -> ConflictError
      (concurrent add of the same language), anything else -> PersistenceError
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from translation_api.core.domain_types import IsoCode, ProjectId, ProjectState
from translation_api.core.enforce_languages import (
    contains_language, filter_by_state, with_base_language,
)
from translation_api.core.errors import (
    ConflictError, ErrorContext, PersistenceError, ResourceNotFoundError,
)
from translation_api.core.repository_protocols import ProjectRepository
from translation_api.models import Language, Project

logger = logging.getLogger(__name__)

# Postgres names the constraint, SQLite names its column pair
PROJECT_LANGUAGE_UNIQUE_MARKERS = (
    "uq_project_languages_project_language",
    "project_languages.project_id, project_languages.language_id",
)


class ProjectService:
    """Project operations over a repository capability."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def list_projects(self, state: ProjectState) -> list[Project]:
        """All projects in the given state, storage order."""
        projects = await self.repository.list_projects()
        return filter_by_state(projects, state)

    async def get_project(self, project_id: ProjectId) -> Project:
        project = await self.repository.get_project(project_id)
        if project is None:
            logger.warning(
                f"Project {project_id} not found", extra={"project_id": project_id},
            )
            raise ResourceNotFoundError(
                "Project", str(project_id), ErrorContext(project_id=project_id),
            )
        return project

    async def _get_language(self, iso_code: IsoCode) -> Language:
        language = await self.repository.get_language(iso_code)
        if language is None:
            logger.warning(
                f"Language '{iso_code}' not found", extra={"iso_code": iso_code},
            )
            raise ResourceNotFoundError(
                "Language", iso_code, ErrorContext(iso_code=iso_code),
            )
        return language

    async def create_project(self, name: str, base_language_code: IsoCode) -> Project:
        """Create an active project whose only language is its base language."""
        if await self.repository.name_exists(name):
            logger.warning(f"Project with name '{name}' already exists")
            raise ConflictError("Project with same name already exists")

        base_language = await self._get_language(base_language_code)
        project = Project(
            name=name,
            archived=False,
            base_language=base_language,
            languages=[base_language],
        )
        self.repository.add(project)
        await self._commit("create")
        logger.info(f"Project '{name}' created", extra={"project_id": project.id})
        return await self.get_project(ProjectId(project.id))

    async def rename_project(self, project_id: ProjectId, name: str) -> Project:
        project = await self.get_project(project_id)
        project.name = name
        await self._commit("save", project_id)
        return await self.get_project(project_id)

    async def archive_project(self, project_id: ProjectId) -> Project:
        """Soft-delete. Archiving an archived project is a no-op that still succeeds."""
        project = await self.get_project(project_id)
        project.archived = True
        await self._commit("save", project_id)
        logger.info(f"Project {project_id} archived", extra={"project_id": project_id})
        return await self.get_project(project_id)

    async def add_language(self, project_id: ProjectId, iso_code: IsoCode) -> Project:
        project = await self.get_project(project_id)
        if contains_language(iso_code, project.languages):
            logger.warning(
                f"Language '{iso_code}' already present in project {project_id}",
                extra={"project_id": project_id, "iso_code": iso_code},
            )
            raise ConflictError("Project already contains language")

        language = await self._get_language(iso_code)
        project.languages.append(language)
        await self._commit("save", project_id)
        return await self.get_project(project_id)

    async def set_base_language(self, project_id: ProjectId, iso_code: IsoCode) -> Project:
        """Switch the base language, attaching it first when it is not attached yet."""
        project = await self.get_project(project_id)
        language = await self._get_language(iso_code)
        project.base_language = language
        project.languages = with_base_language(project.languages, language)
        await self._commit("save", project_id)
        return await self.get_project(project_id)

    async def _commit(self, operation: str, project_id: ProjectId | None = None) -> None:
        try:
            await self.repository.commit()
        except IntegrityError as e:
            await self.repository.rollback()
            if _is_duplicate_language(e):
                logger.warning(
                    "Concurrent language assignment rejected by store",
                    extra={"project_id": project_id},
                )
                raise ConflictError("Project already contains language")
            logger.error(f"Project {operation} rejected: {e.orig}")
            raise PersistenceError(str(e.orig), operation)
        except SQLAlchemyError as e:
            await self.repository.rollback()
            reason = str(getattr(e, "orig", None) or e)
            logger.error(f"Project {operation} failed: {reason}")
            raise PersistenceError(reason, operation)


def _is_duplicate_language(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(marker in message for marker in PROJECT_LANGUAGE_UNIQUE_MARKERS)

