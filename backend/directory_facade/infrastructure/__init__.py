"""Infrastructure Layer — upstream client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All transport failures mapped to core error types

Design Decisions:
    - Thin wrappers over raw clients (ADR: ExMA single responsibility)
"""
