"""Language ORM — reference data, created out of band (migrations, seeds).

Invariants:
    - iso_code is unique and matched case-sensitively
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from translation_api.db.base import Base


class Language(Base):
    """A language a project can be translated into."""
    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    iso_code: Mapped[str] = mapped_column(
        String(16), nullable=False, unique=True, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"Language(iso_code={self.iso_code!r})"
