from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional
import logging
import sqlite3

from typedrill.app.errors import DatabaseError
from typedrill.app.state import TestOutcome
from typedrill.utils.file_handler import data_dir

log = logging.getLogger(__name__)

DB_NAME = "profile.db"


@dataclass
class ProfileStatistics:
    total_tests: int = 0
    average_gross_wpm: float = 0.0
    average_net_wpm: float = 0.0
    pb: float = 0.0  # best net wpm


def _ensure_schema(conn):
    conn.execute("""
    CREATE TABLE IF NOT EXISTS profiles(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT UNIQUE NOT NULL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    );
    """)
    conn.execute("""
    CREATE TABLE IF NOT EXISTS results(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        profile_id INTEGER,
        length INTEGER,
        wordlist TEXT,
        mode TEXT,
        hits INTEGER,
        misses INTEGER,
        elapsed REAL,
        gross REAL,
        net REAL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY(profile_id) REFERENCES profiles(id)
    );
    """)


def get_conn(db_path: Optional[Path] = None):
    path = db_path or data_dir() / DB_NAME
    conn = sqlite3.connect(str(path))
    try:
        _ensure_schema(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn


@contextmanager
def _session(db_path: Optional[Path]) -> Iterator[sqlite3.Connection]:
    try:
        conn = get_conn(db_path)
    except sqlite3.Error as e:
        raise DatabaseError(str(e)) from e
    try:
        yield conn
        conn.commit()
    except sqlite3.Error as e:
        raise DatabaseError(str(e)) from e
    finally:
        conn.close()


def upsert_profile(name: str, db_path: Optional[Path] = None) -> int:
    with _session(db_path) as conn:
        conn.execute("INSERT OR IGNORE INTO profiles(name) VALUES (?)", (name,))
        row = conn.execute("SELECT id FROM profiles WHERE name=?", (name,)).fetchone()
    return row[0]


_RESULT_COLUMNS = ("length", "wordlist", "mode", "hits", "misses", "elapsed", "gross", "net")


def insert_result(profile_id: int, outcome: TestOutcome, db_path: Optional[Path] = None):
    row = outcome.to_dict()
    with _session(db_path) as conn:
        conn.execute(
            f"INSERT INTO results(profile_id, {', '.join(_RESULT_COLUMNS)})"
            f" VALUES (?{',?' * len(_RESULT_COLUMNS)})",
            (profile_id, *(row[c] for c in _RESULT_COLUMNS)),
        )
    log.info("Recorded %s result for profile %d", outcome.mode, profile_id)


def recent_results(profile_id: int, n: int, db_path: Optional[Path] = None) -> List[TestOutcome]:
    """Last `n` results, newest first."""
    if n <= 0:
        return []
    with _session(db_path) as conn:
        rows = conn.execute(
            f"SELECT {', '.join(_RESULT_COLUMNS)} FROM results"
            " WHERE profile_id=? ORDER BY id DESC LIMIT ?",
            (profile_id, n),
        ).fetchall()
    return [TestOutcome.from_dict(dict(zip(_RESULT_COLUMNS, row))) for row in rows]


def profile_stats(profile_id: int, db_path: Optional[Path] = None) -> ProfileStatistics:
    with _session(db_path) as conn:
        total, avg_gross, avg_net, best = conn.execute(
            "SELECT COUNT(*), AVG(gross), AVG(net), MAX(net) FROM results WHERE profile_id=?",
            (profile_id,),
        ).fetchone()
    if not total:
        return ProfileStatistics()
    return ProfileStatistics(
        total_tests=total,
        average_gross_wpm=avg_gross,
        average_net_wpm=avg_net,
        pb=best,
    )
