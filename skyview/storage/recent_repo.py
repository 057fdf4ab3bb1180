"""Repository for the persisted recent-city list."""

import sqlite3


def get_recent_cities(conn: sqlite3.Connection, limit: int) -> list[str]:
    rows = conn.execute(
        "SELECT name FROM recent_cities ORDER BY position LIMIT ?", (limit,)
    ).fetchall()
    return [row["name"] for row in rows]


def replace_recent_cities(conn: sqlite3.Connection, names: list[str]) -> None:
    """Overwrite the stored list in a single transaction."""
    with conn:
        conn.execute("DELETE FROM recent_cities")
        conn.executemany(
            "INSERT INTO recent_cities (position, name) VALUES (?, ?)",
            list(enumerate(names)),
        )


def clear_recent_cities(conn: sqlite3.Connection) -> None:
    conn.execute("DELETE FROM recent_cities")
    conn.commit()
