"""Database Infrastructure: async session factory and SQLAlchemy Base.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite driver for the embedded SQLite file: both page indexes share one
      file, so one transaction spans them
"""
