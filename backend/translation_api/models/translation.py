"""Translation ORM — the text of an identifier in one specific language.

Invariants:
    - Always belongs to one Identifier and is tagged with one Language
    - approved / improvement_needed default to False
"""

from sqlalchemy import Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from translation_api.db.base import Base


class Translation(Base):
    __tablename__ = "translations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    translation: Mapped[str] = mapped_column(Text, nullable=False, default="")
    identifier_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("identifiers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    language_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("languages.id"), nullable=False,
    )
    approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    improvement_needed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    identifier: Mapped["Identifier"] = relationship(
        "Identifier", back_populates="translations", lazy="raise",
    )
    language: Mapped["Language"] = relationship("Language", lazy="raise")
    revisions: Mapped[list["Revision"]] = relationship(
        "Revision", back_populates="translation",
        cascade="all, delete-orphan", order_by="Revision.id", lazy="raise",
    )
