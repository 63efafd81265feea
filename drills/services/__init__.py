"""Services Layer — async shell and boundary handlers.

Invariants:
    - Services validate raw input before calling core
    - Only services/ awaits; core/ stays synchronous

Design Decisions:
    - One file per concern: delayed computation vs catalog boundary
"""
