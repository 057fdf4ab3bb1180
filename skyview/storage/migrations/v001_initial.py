"""Initial schema: the recent-city list."""

import sqlite3

DDL = [
    # Most recent first: position 0 is the latest successful lookup
    """
    CREATE TABLE IF NOT EXISTS recent_cities (
        position INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
