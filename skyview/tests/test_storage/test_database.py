"""Tests for database connection, WAL mode, and migrations."""

from pathlib import Path

from skyview.storage.database import MIGRATIONS, connect, run_migrations, schema_version


class TestConnect:
    def test_wal_mode(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        mode = db.execute("PRAGMA journal_mode").fetchone()[0]
        assert mode == "wal"
        db.close()

    def test_creates_parent_directory(self, tmp_path: Path):
        db = connect(tmp_path / "nested" / "dir" / "test.db")
        assert (tmp_path / "nested" / "dir").is_dir()
        db.close()

    def test_row_factory(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        db.execute("CREATE TABLE t (x TEXT)")
        db.execute("INSERT INTO t VALUES ('hello')")
        row = db.execute("SELECT x FROM t").fetchone()
        assert row["x"] == "hello"
        db.close()


class TestMigrations:
    def test_creates_tables(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        applied = run_migrations(db)
        assert "v001_initial" in applied

        tables = {
            row[0]
            for row in db.execute(
                "SELECT name FROM sqlite_master WHERE type='table'"
            ).fetchall()
        }
        assert "recent_cities" in tables
        assert schema_version(db) == len(MIGRATIONS)
        db.close()

    def test_idempotent(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        run_migrations(db)
        assert run_migrations(db) == []
        db.close()

    def test_version_persists_across_connections(self, tmp_path: Path):
        db = connect(tmp_path / "test.db")
        run_migrations(db)
        db.close()

        db = connect(tmp_path / "test.db")
        assert schema_version(db) == len(MIGRATIONS)
        assert run_migrations(db) == []
        db.close()
