"""Core Layer - pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validators and search helpers are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (services/ orchestrates the stores)
"""
