"""Pydantic Schemas — validation for raw input at the service boundary.

Invariants:
    - Schemas validate at system boundary (raw dicts from callers)
    - Schemas convert to core domain types via to_domain()

Design Decisions:
    - Separate from core: schemas are input contracts, core types are what logic sees
"""
