"""Services Layer — project operations orchestrated over the repository capability.

Invariants:
    - Services never build queries; they call the ProjectRepository they are handed
    - Domain failures raised as TranslationApiError subclasses, mapped to HTTP in api/

Design Decisions:
    - One service class per aggregate (Project)
"""
