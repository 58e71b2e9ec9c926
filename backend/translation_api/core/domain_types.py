"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProjectId wraps the integer surrogate key
    - IsoCode is matched case-sensitively everywhere
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", int)
IsoCode = NewType("IsoCode", str)


# ─── Enums ───────────────────────────────────────────────────────

class ProjectState(str, Enum):
    """Project lifecycle: active -> archived, no way back."""
    ACTIVE = "active"
    ARCHIVED = "archived"

    @property
    def archived(self) -> bool:
        return self is ProjectState.ARCHIVED
