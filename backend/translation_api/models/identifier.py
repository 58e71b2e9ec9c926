"""Identifier ORM — a string key within a project representing one translatable string."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from translation_api.db.base import Base


class Identifier(Base):
    __tablename__ = "identifiers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )

    project: Mapped["Project"] = relationship(
        "Project", back_populates="identifiers", lazy="raise",
    )
    translations: Mapped[list["Translation"]] = relationship(
        "Translation", back_populates="identifier",
        cascade="all, delete-orphan", order_by="Translation.id", lazy="raise",
    )
