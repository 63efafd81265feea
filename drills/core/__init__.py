"""Core Layer — pure exercise logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, schemas/, or infrastructure/
    - All functions are pure and deterministic
    - Exercises never import each other (errors and domain_types are shared vocabulary)

Design Decisions:
    - Functional core separated from async shell: the delay lives in services/,
      the decision lives here
"""
