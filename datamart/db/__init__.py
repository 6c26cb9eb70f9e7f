"""Database Infrastructure - SQLAlchemy declarative Base for the record table.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
