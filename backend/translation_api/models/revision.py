"""Revision ORM — historical snapshot of a translation's text and approval state."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from translation_api.db.base import Base


class Revision(Base):
    __tablename__ = "revisions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    translation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("translations.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    revision_translation: Mapped[str] = mapped_column(Text, nullable=False)
    approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    translation: Mapped["Translation"] = relationship(
        "Translation", back_populates="revisions", lazy="raise",
    )
