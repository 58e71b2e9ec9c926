"""Project ORM — the aggregate root of the translation store.

Invariants:
    - base_language is always a member of languages (enforced by services, not the store)
    - archived is a soft delete: projects are never removed
    - a language is attached to a project at most once (project_languages unique constraint)
    - languages load in attach order (project_languages.position)

Design Decisions:
    - name is indexed but not unique: rename may legitimately produce duplicates,
      create checks uniqueness itself
    - No lazy loading on relationships: the repository declares eager loads per DTO shape
"""

from sqlalchemy import (
    Boolean, Column, ForeignKey, Integer, String, Table, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from translation_api.db.base import Base


project_languages = Table(
    "project_languages",
    Base.metadata,
    Column("position", Integer, primary_key=True, autoincrement=True),
    Column(
        "project_id", Integer,
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
    ),
    Column(
        "language_id", Integer,
        ForeignKey("languages.id", ondelete="CASCADE"), nullable=False,
    ),
    UniqueConstraint(
        "project_id", "language_id", name="uq_project_languages_project_language",
    ),
)


class Project(Base):
    """A translatable unit with one base language and N target languages."""
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    base_language_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("languages.id"), nullable=False,
    )

    # Relationships
    base_language: Mapped["Language"] = relationship(
        "Language", lazy="raise",
    )
    languages: Mapped[list["Language"]] = relationship(
        "Language", secondary=project_languages,
        order_by=project_languages.c.position, lazy="raise",
    )
    identifiers: Mapped[list["Identifier"]] = relationship(
        "Identifier", back_populates="project",
        cascade="all, delete-orphan", order_by="Identifier.id", lazy="raise",
    )
