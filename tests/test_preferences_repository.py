"""Tests for the SQLite-backed preferences store."""

import sqlite3
import threading
from pathlib import Path

import pytest

from services.preferences_repository import SqlitePreferences
from services.profile_store import ProfileStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "prefs.db"


def test_missing_key_returns_none(db_path: Path):
    prefs = SqlitePreferences("usuario", db_path)

    assert prefs.get("name") is None


def test_put_many_upserts(db_path: Path):
    prefs = SqlitePreferences("usuario", db_path)

    prefs.put_many({"name": "Ana", "theme": "light"})
    prefs.put_many({"theme": "dark"})

    assert prefs.as_dict() == {"name": "Ana", "theme": "dark"}


def test_remove_many_ignores_missing_keys(db_path: Path):
    prefs = SqlitePreferences("usuario", db_path)
    prefs.put_many({"name": "Ana", "theme": "dark"})

    prefs.remove_many(["name", "email"])

    assert prefs.as_dict() == {"theme": "dark"}


def test_values_survive_new_instance(db_path: Path):
    SqlitePreferences("usuario", db_path).put_many({"theme": "dark"})

    assert SqlitePreferences("usuario", db_path).get("theme") == "dark"


def test_named_stores_are_isolated(db_path: Path):
    first = SqlitePreferences("usuario", db_path)
    second = SqlitePreferences("otro", db_path)

    first.put_many({"name": "Ana"})

    assert second.get("name") is None
    second.remove_many(["name"])
    assert first.get("name") == "Ana"


def test_failed_write_leaves_previous_profile(db_path: Path):
    prefs = SqlitePreferences("usuario", db_path)
    store = ProfileStore(prefs)
    store.save_profile("Ana", "ana@ex.com", "12345678")
    before = prefs.as_dict()

    with pytest.raises(sqlite3.IntegrityError):
        # None bryter NOT NULL mitt i batchen, hela transaktionen rullas tillbaka
        prefs.put_many({"name": "Bo", "email": None})  # type: ignore[dict-item]

    assert prefs.as_dict() == before


def test_profile_store_persists_across_restarts(db_path: Path):
    ProfileStore(SqlitePreferences("usuario", db_path)).save_profile("  Ana ", "ana@ex.com", "123456789")
    ProfileStore(SqlitePreferences("usuario", db_path)).save_theme("dark")

    reopened = ProfileStore(SqlitePreferences("usuario", db_path))
    reopened.clear_profile()

    assert reopened.load_profile().is_empty
    assert reopened.load_theme().value == "dark"


def test_get_many_returns_only_present_keys(db_path: Path):
    prefs = SqlitePreferences("usuario", db_path)
    prefs.put_many({"name": "Ana", "theme": "dark"})

    assert prefs.get_many(["name", "email"]) == {"name": "Ana"}
    assert prefs.get_many([]) == {}


def test_reader_never_sees_partial_profile(db_path: Path):
    writer_store = ProfileStore(SqlitePreferences("usuario", db_path))
    reader_store = ProfileStore(SqlitePreferences("usuario", db_path))
    stop = threading.Event()

    def writer() -> None:
        while not stop.is_set():
            writer_store.save_profile("Ana", "ana@ex.com", "12345678")
            writer_store.clear_profile()

    thread = threading.Thread(target=writer)
    thread.start()
    try:
        partial = []
        for _ in range(500):
            profile = reader_store.load_profile()
            fields = [profile.name, profile.email, profile.phone, profile.registered_at]
            if any(fields) and not all(fields):
                partial.append(profile)
    finally:
        stop.set()
        thread.join()

    assert partial == []
