from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, Iterable, Optional, Protocol

from core.database import connection_scope, init_db


class PreferencesStore(Protocol):
    """Nyckel/värde-lagring för en namngiven inställningsfil."""

    def get(self, key: str) -> Optional[str]: ...

    def get_many(self, keys: Iterable[str]) -> Dict[str, str]: ...

    def put_many(self, values: Dict[str, str]) -> None: ...

    def remove_many(self, keys: Iterable[str]) -> None: ...

    def as_dict(self) -> Dict[str, str]: ...


class SqlitePreferences:
    """Inställningar persisterade i SQLite, en rad per (store, key)."""

    def __init__(self, name: str, db_path: Path | None = None) -> None:
        self.name = name
        self.db_path = db_path
        self._lock = threading.Lock()
        init_db(db_path)

    def get(self, key: str) -> Optional[str]:
        with self._lock, connection_scope(self.db_path) as conn:
            cur = conn.execute(
                "SELECT value FROM preferences WHERE store = ? AND key = ?",
                (self.name, key),
            )
            row = cur.fetchone()
            return row[0] if row else None

    def get_many(self, keys: Iterable[str]) -> Dict[str, str]:
        """Läs flera nycklar i en enda SELECT, saknade nycklar utelämnas."""
        wanted = list(keys)
        if not wanted:
            return {}
        placeholders = ", ".join("?" for _ in wanted)
        with self._lock, connection_scope(self.db_path) as conn:
            cur = conn.execute(
                f"SELECT key, value FROM preferences WHERE store = ? AND key IN ({placeholders})",
                (self.name, *wanted),
            )
            return {row[0]: row[1] for row in cur.fetchall()}

    def put_many(self, values: Dict[str, str]) -> None:
        # Alla nycklar skrivs i samma transaktion
        with self._lock, connection_scope(self.db_path) as conn:
            with conn:
                conn.executemany(
                    "INSERT INTO preferences (store, key, value) VALUES (?, ?, ?) "
                    "ON CONFLICT(store, key) DO UPDATE SET value = excluded.value",
                    [(self.name, key, value) for key, value in values.items()],
                )

    def remove_many(self, keys: Iterable[str]) -> None:
        with self._lock, connection_scope(self.db_path) as conn:
            with conn:
                conn.executemany(
                    "DELETE FROM preferences WHERE store = ? AND key = ?",
                    [(self.name, key) for key in keys],
                )

    def as_dict(self) -> Dict[str, str]:
        with self._lock, connection_scope(self.db_path) as conn:
            cur = conn.execute("SELECT key, value FROM preferences WHERE store = ? ORDER BY key", (self.name,))
            return {row[0]: row[1] for row in cur.fetchall()}


class InMemoryPreferences:
    """Minnesbaserad variant, används i tester."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def get_many(self, keys: Iterable[str]) -> Dict[str, str]:
        with self._lock:
            return {key: self._values[key] for key in keys if key in self._values}

    def put_many(self, values: Dict[str, str]) -> None:
        with self._lock:
            self._values.update(values)

    def remove_many(self, keys: Iterable[str]) -> None:
        with self._lock:
            for key in keys:
                self._values.pop(key, None)

    def as_dict(self) -> Dict[str, str]:
        with self._lock:
            return dict(sorted(self._values.items()))


__all__ = ["PreferencesStore", "SqlitePreferences", "InMemoryPreferences"]
