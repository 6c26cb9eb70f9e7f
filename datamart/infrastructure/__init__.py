"""Infrastructure Layer - database sessions, record stores, logging.

Invariants:
    - The only layer that talks to SQLAlchemy engines and sessions
"""
