"""Language Membership Rules — pure checks over a project's attached languages.

Invariants:
    - ISO codes compared case-sensitively ("en" != "EN")
    - with_base_language never duplicates a language already attached
    - Functions never mutate their inputs; the shell applies the result

Design Decisions:
    - Linear scans: a project carries a handful of languages
    - Structural LanguageLike protocol so rules run on ORM rows and plain test doubles alike
"""

from typing import Iterable, Protocol, Sequence, TypeVar

from translation_api.core.domain_types import ProjectState


class LanguageLike(Protocol):
    iso_code: str


class ProjectLike(Protocol):
    archived: bool


L = TypeVar("L", bound=LanguageLike)
P = TypeVar("P", bound=ProjectLike)


def contains_language(iso_code: str, languages: Iterable[LanguageLike]) -> bool:
    """True when a language with exactly this ISO code is attached."""
    return any(language.iso_code == iso_code for language in languages)


def with_base_language(languages: Sequence[L], base_language: L) -> list[L]:
    """Return the language list extended with base_language when it is missing."""
    result = list(languages)
    if not contains_language(base_language.iso_code, result):
        result.append(base_language)
    return result


def filter_by_state(projects: Iterable[P], state: ProjectState) -> list[P]:
    """Keep projects whose archived flag matches state, preserving order."""
    return [p for p in projects if p.archived == state.archived]
