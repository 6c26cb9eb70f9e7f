"""Services Layer - imperative shell that orchestrates validators and record stores.

Invariants:
    - Services receive their stores by injection; they never open DB sessions
"""
