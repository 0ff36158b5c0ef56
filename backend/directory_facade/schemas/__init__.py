"""Pydantic Schemas — upstream records and request/response validation.

Invariants:
    - Schemas validate at system boundary (caller input, upstream responses)
    - No business rules here: constraints live in core/

Design Decisions:
    - Explicit imports from submodules, no re-exports (ADR: no convention-over-config)
"""
