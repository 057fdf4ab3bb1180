"""SQLite connection for the recent-city store, with schema versioning.

The schema version lives in ``PRAGMA user_version``: version N means the
first N entries of ``MIGRATIONS`` have been applied.
"""

import sqlite3
from pathlib import Path

from skyview.storage.migrations import v001_initial

MIGRATIONS = [v001_initial]


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a WAL-mode connection, creating the parent directory if needed."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def schema_version(conn: sqlite3.Connection) -> int:
    return conn.execute("PRAGMA user_version").fetchone()[0]


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Bring the schema up to date. Returns the names of migrations applied now."""
    current = schema_version(conn)
    applied = []
    for version, migration in enumerate(MIGRATIONS, start=1):
        if version <= current:
            continue
        migration.up(conn)
        # PRAGMA does not accept bound parameters
        conn.execute(f"PRAGMA user_version = {version:d}")
        conn.commit()
        applied.append(migration.__name__.rsplit(".", 1)[-1])
    return applied
