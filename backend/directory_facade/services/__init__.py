"""Services Layer — orchestrates upstream IO around the pure core rules.

Invariants:
    - Services never import from api/
    - Each public method maps to exactly one caller-facing operation
"""
