"""Infrastructure Layer — database session management, repositories, logging.

Invariants:
    - Infrastructure imports core/ only for errors, domain types and protocols
    - SQLAlchemy exceptions never escape this layer unmapped

Design Decisions:
    - Repositories implement core/repository_protocols.py structurally
"""
