"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Services reach the store only through ProjectRepository
    - Implementations provided by shell via dependency injection (api/deps.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can hand in any object with these methods
    - Every returned Project has the associations its DTO needs already loaded:
      list_projects -> base_language, languages
      get_project   -> base_language, languages, identifiers.translations.language
"""

from typing import Any, Protocol, Sequence

from translation_api.core.domain_types import IsoCode, ProjectId


class ProjectRepository(Protocol):
    """Contract for project persistence — implemented by shell."""
    async def list_projects(self) -> Sequence[Any]: ...
    async def get_project(self, project_id: ProjectId) -> Any | None: ...
    async def name_exists(self, name: str) -> bool: ...
    async def get_language(self, iso_code: IsoCode) -> Any | None: ...
    def add(self, entity: Any) -> None: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
