"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project is the aggregate root; identifiers, translations and revisions hang off it

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from translation_api.models.language import Language  # noqa: F401
from translation_api.models.project import Project, project_languages  # noqa: F401
from translation_api.models.identifier import Identifier  # noqa: F401
from translation_api.models.translation import Translation  # noqa: F401
from translation_api.models.revision import Revision  # noqa: F401
from translation_api.models.user import User  # noqa: F401
