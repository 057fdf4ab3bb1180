"""Recent-city list: bounded, case-insensitively unique, most recent first.

Storage failures never escape this module. A broken or unavailable database
degrades to an empty (or stale) list and a warning in the log.
"""

import logging
import sqlite3
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from skyview.models.errors import PersistenceError
from skyview.storage import recent_repo
from skyview.storage.database import connect, run_migrations

logger = logging.getLogger(__name__)

MAX_RECENT_CITIES = 5


def normalize_recent(
    names: Iterable[str], limit: int = MAX_RECENT_CITIES
) -> list[str]:
    """Trim, drop blanks and case-insensitive repeats (first wins), then cap."""
    seen: set[str] = set()
    cities: list[str] = []
    for name in names:
        trimmed = name.strip()
        folded = trimmed.casefold()
        if not trimmed or folded in seen:
            continue
        seen.add(folded)
        cities.append(trimmed)
    return cities[:limit]


def push_recent(
    cities: list[str], name: str, limit: int = MAX_RECENT_CITIES
) -> list[str]:
    """Move ``name`` to the front, dropping any case-insensitive duplicate."""
    return normalize_recent([name, *cities], limit)


class RecentCityStore:
    def __init__(self, db_path: str | Path, limit: int = MAX_RECENT_CITIES):
        self.db_path = Path(db_path)
        self.limit = limit

    def load(self) -> list[str]:
        try:
            with self._session() as conn:
                return recent_repo.get_recent_cities(conn, self.limit)
        except PersistenceError as e:
            logger.warning("Could not load recent cities: %s", e)
            return []

    def save(self, names: list[str]) -> None:
        try:
            with self._session() as conn:
                recent_repo.replace_recent_cities(
                    conn, normalize_recent(names, self.limit)
                )
        except PersistenceError as e:
            logger.warning("Could not save recent cities: %s", e)

    def add(self, name: str) -> list[str]:
        """Record a successful lookup and return the updated list."""
        cities = push_recent(self.load(), name, self.limit)
        self.save(cities)
        return cities

    def clear(self) -> None:
        try:
            with self._session() as conn:
                recent_repo.clear_recent_cities(conn)
        except PersistenceError as e:
            logger.warning("Could not clear recent cities: %s", e)

    @contextmanager
    def _session(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = connect(self.db_path)
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError(f"cannot open {self.db_path}: {e}") from e
        try:
            run_migrations(conn)
            yield conn
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e
        finally:
            conn.close()
