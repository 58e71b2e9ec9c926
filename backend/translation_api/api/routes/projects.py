"""Project Routes — listing, detail, creation, rename, archive, and language assignment.

Invariants:
    - GET routes are public; every mutating route requires a logged-in user
    - Request bodies validated by Pydantic before reaching the handler (400 on failure)
    - Every response is a DTO from schemas/project.py, never an ORM row
    - Routes hold no business logic: ProjectService decides, routes map to status codes

Design Decisions:
    - /active and /archived declared before /{project_id} so they are never parsed as ids
    - rename accepts PATCH and POST: existing clients use both
"""

import logging

from fastapi import APIRouter, Depends, status

from translation_api.api.deps import get_current_user, get_project_service
from translation_api.core.domain_types import IsoCode, ProjectId, ProjectState
from translation_api.schemas.project import (
    ProjectCreate, ProjectLanguage, ProjectRename, ProjectResponse, ProjectSummary,
)
from translation_api.services.manage_projects import ProjectService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/projects", tags=["projects"])

login_required = [Depends(get_current_user)]


@router.get("/active", response_model=list[ProjectSummary])
async def list_active_projects(
    service: ProjectService = Depends(get_project_service),
):
    """All projects that are not archived."""
    projects = await service.list_projects(ProjectState.ACTIVE)
    return [ProjectSummary.from_project(p) for p in projects]


@router.get("/archived", response_model=list[ProjectSummary])
async def list_archived_projects(
    service: ProjectService = Depends(get_project_service),
):
    """All archived projects."""
    projects = await service.list_projects(ProjectState.ARCHIVED)
    return [ProjectSummary.from_project(p) for p in projects]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int, service: ProjectService = Depends(get_project_service),
):
    """Project with languages, identifiers and their translations."""
    project = await service.get_project(ProjectId(project_id))
    return ProjectResponse.from_project(project)


@router.post(
    "", response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED, dependencies=login_required,
)
async def create_project(
    body: ProjectCreate, service: ProjectService = Depends(get_project_service),
):
    project = await service.create_project(
        body.name, IsoCode(body.base_language_code),
    )
    return ProjectResponse.from_project(project)


@router.api_route(
    "/{project_id}/rename", methods=["PATCH", "POST"],
    response_model=ProjectResponse, dependencies=login_required,
)
async def rename_project(
    project_id: int,
    body: ProjectRename,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.rename_project(ProjectId(project_id), body.name)
    return ProjectResponse.from_project(project)


@router.post(
    "/{project_id}/archive", response_model=ProjectResponse,
    dependencies=login_required,
)
async def archive_project(
    project_id: int, service: ProjectService = Depends(get_project_service),
):
    project = await service.archive_project(ProjectId(project_id))
    return ProjectResponse.from_project(project)


@router.post(
    "/{project_id}/languages", response_model=ProjectResponse,
    dependencies=login_required,
)
async def add_language_to_project(
    project_id: int,
    body: ProjectLanguage,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.add_language(
        ProjectId(project_id), IsoCode(body.language_code),
    )
    return ProjectResponse.from_project(project)


@router.post(
    "/{project_id}/baseLanguage", response_model=ProjectResponse,
    dependencies=login_required,
)
async def set_base_language(
    project_id: int,
    body: ProjectLanguage,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.set_base_language(
        ProjectId(project_id), IsoCode(body.language_code),
    )
    return ProjectResponse.from_project(project)
