"""Infrastructure Layer — cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ exercise logic (config is allowed)
"""
