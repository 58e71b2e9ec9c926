"""Project Schemas — request validation and the DTOs returned by project routes.

Invariants:
    - Required string fields must be present and non-empty (missing/empty -> 400)
    - Language codes carry no length limit: an unknown code of any length is a 404
    - ProjectSummary.languages and ProjectResponse.languages are never null ([] when empty)
    - TranslationResponse.language is the plain ISO code, not a nested object
    - DTOs carry no foreign keys, timestamps, or back-references

Design Decisions:
    - from_project classmethods: mapping reads only associations the repository eager-loads
    - alias_generator=to_camel + populate_by_name: camelCase JSON, snake_case attributes
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


# --- Requests -----------------------------------------------------------------

class ProjectCreate(CamelModel):
    """POST /projects — {name, baseLanguageCode}."""
    name: str = Field(min_length=1, max_length=255)
    base_language_code: str = Field(min_length=1)


class ProjectRename(CamelModel):
    name: str = Field(min_length=1, max_length=255)


class ProjectLanguage(CamelModel):
    """Body of the add-language and set-base-language routes."""
    language_code: str = Field(min_length=1)


# --- Responses ----------------------------------------------------------------

class LanguageResponse(CamelModel):
    id: int
    iso_code: str
    name: str


class TranslationResponse(CamelModel):
    id: int
    translation: str
    language: str
    approved: bool
    improvement_needed: bool

    @classmethod
    def from_translation(cls, translation) -> "TranslationResponse":
        return cls(
            id=translation.id,
            translation=translation.translation,
            language=translation.language.iso_code,
            approved=translation.approved,
            improvement_needed=translation.improvement_needed,
        )


class IdentifierResponse(CamelModel):
    id: int
    identifier: str
    translations: list[TranslationResponse] = []

    @classmethod
    def from_identifier(cls, identifier) -> "IdentifierResponse":
        return cls(
            id=identifier.id,
            identifier=identifier.identifier,
            translations=[
                TranslationResponse.from_translation(t)
                for t in identifier.translations
            ],
        )


class ProjectSummary(CamelModel):
    """Listing shape: no identifiers."""
    id: int
    name: str
    base_language: LanguageResponse
    languages: list[LanguageResponse] = []

    @classmethod
    def from_project(cls, project) -> "ProjectSummary":
        return cls(
            id=project.id,
            name=project.name,
            base_language=LanguageResponse.model_validate(project.base_language),
            languages=[
                LanguageResponse.model_validate(lang)
                for lang in project.languages or []
            ],
        )


class ProjectResponse(CamelModel):
    """Full project DTO returned by detail and every mutating route."""
    id: int
    name: str
    archived: bool
    base_language: LanguageResponse
    languages: list[LanguageResponse] = []
    identifiers: list[IdentifierResponse] = []

    @classmethod
    def from_project(cls, project) -> "ProjectResponse":
        return cls(
            id=project.id,
            name=project.name,
            archived=project.archived,
            base_language=LanguageResponse.model_validate(project.base_language),
            languages=[
                LanguageResponse.model_validate(lang)
                for lang in project.languages or []
            ],
            identifiers=[
                IdentifierResponse.from_identifier(i)
                for i in project.identifiers or []
            ],
        )
