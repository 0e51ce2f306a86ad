from __future__ import annotations

import sqlite3
from pathlib import Path
from contextlib import contextmanager
from typing import Generator

from core.config import settings


def get_connection(db_path: Path | None = None) -> sqlite3.Connection:
    """Skapa en SQLite-anslutning mot den lokala databasen."""
    target = db_path or settings.database_path
    target.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(target)
    connection.row_factory = sqlite3.Row
    return connection


@contextmanager
def connection_scope(db_path: Path | None = None) -> Generator[sqlite3.Connection, None, None]:
    """Enkel context-manager för att öppna/stänga anslutningar."""
    conn = get_connection(db_path)
    try:
        yield conn
    finally:
        conn.close()


def init_db(db_path: Path | None = None) -> None:
    """Initiera tabeller om de inte finns."""
    schema = [
        """
        CREATE TABLE IF NOT EXISTS preferences (
            store TEXT NOT NULL,
            key TEXT NOT NULL,
            value TEXT NOT NULL,
            PRIMARY KEY (store, key)
        )
        """,
    ]

    with connection_scope(db_path) as conn:
        cur = conn.cursor()
        for stmt in schema:
            cur.execute(stmt)
        conn.commit()
