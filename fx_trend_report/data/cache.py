"""SQLite cache for exchange-rate data."""

import sqlite3
from datetime import date, datetime
from pathlib import Path

import pandas as pd

from fx_trend_report.models import LatestRates, RateSeries


class DataCache:
    """
    SQLite-based, time-bounded cache for provider responses.

    Historical series are stored per request key; each entry carries an
    expiry after which `get` treats it as missing.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS cache_entries (
                    cache_key TEXT PRIMARY KEY,
                    base TEXT NOT NULL,
                    target TEXT NOT NULL,
                    fetched_at TEXT NOT NULL,
                    expires_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS observations (
                    cache_key TEXT NOT NULL,
                    date TEXT NOT NULL,
                    value REAL NOT NULL,
                    PRIMARY KEY (cache_key, date)
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS latest_rates (
                    base TEXT NOT NULL,
                    currency TEXT NOT NULL,
                    rate REAL NOT NULL,
                    date TEXT NOT NULL,
                    fetched_at TEXT NOT NULL,
                    expires_at TEXT NOT NULL,
                    PRIMARY KEY (base, currency)
                )
            """)

    def get(self, key: str, now: datetime | None = None) -> RateSeries | None:
        """
        Retrieve a cached series.

        Returns:
            The series, or None if the key is unknown or has expired
        """
        now = now or datetime.now()
        with self._get_connection() as conn:
            entry = conn.execute(
                "SELECT base, target, expires_at FROM cache_entries WHERE cache_key = ?",
                (key,),
            ).fetchone()
            if entry is None or datetime.fromisoformat(entry["expires_at"]) <= now:
                return None

            df = pd.read_sql_query(
                "SELECT date, value FROM observations WHERE cache_key = ? ORDER BY date",
                conn,
                params=[key],
            )

        if not df.empty:
            df["date"] = pd.to_datetime(df["date"])
            df.set_index("date", inplace=True)
        return RateSeries.from_frame(df, entry["base"], entry["target"])

    def put(
        self,
        key: str,
        series: RateSeries,
        expires_at: datetime,
        fetched_at: datetime | None = None,
    ) -> int:
        """
        Store a series under `key`, replacing any previous entry.

        Returns:
            Number of observations stored
        """
        fetched_at = fetched_at or datetime.now()
        rows = [(key, p.date.isoformat(), p.rate) for p in series.points]

        with self._get_connection() as conn:
            conn.execute("DELETE FROM observations WHERE cache_key = ?", (key,))
            conn.executemany(
                "INSERT INTO observations (cache_key, date, value) VALUES (?, ?, ?)",
                rows,
            )
            conn.execute(
                """
                INSERT OR REPLACE INTO cache_entries
                (cache_key, base, target, fetched_at, expires_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (key, series.base, series.target, fetched_at.isoformat(), expires_at.isoformat()),
            )
        return len(rows)

    def get_latest(self, base: str, now: datetime | None = None) -> LatestRates | None:
        """Retrieve unexpired latest rates for a base currency."""
        now = now or datetime.now()
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT currency, rate, date, expires_at FROM latest_rates WHERE base = ?",
                (base,),
            ).fetchall()

        if not rows or datetime.fromisoformat(rows[0]["expires_at"]) <= now:
            return None

        return LatestRates(
            base=base,
            date=date.fromisoformat(rows[0]["date"]),
            rates={row["currency"]: row["rate"] for row in rows},
        )

    def put_latest(
        self,
        latest: LatestRates,
        expires_at: datetime,
        fetched_at: datetime | None = None,
    ) -> None:
        """Store latest rates, replacing the previous snapshot for the base."""
        fetched_str = (fetched_at or datetime.now()).isoformat()
        rows = [
            (latest.base, currency, rate, latest.date.isoformat(), fetched_str, expires_at.isoformat())
            for currency, rate in latest.rates.items()
        ]

        with self._get_connection() as conn:
            conn.execute("DELETE FROM latest_rates WHERE base = ?", (latest.base,))
            conn.executemany(
                """
                INSERT INTO latest_rates (base, currency, rate, date, fetched_at, expires_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                rows,
            )

    def purge_expired(self, now: datetime | None = None) -> int:
        """
        Delete expired entries.

        Returns:
            Number of series entries removed
        """
        now_str = (now or datetime.now()).isoformat()
        with self._get_connection() as conn:
            expired = [
                row["cache_key"]
                for row in conn.execute(
                    "SELECT cache_key FROM cache_entries WHERE expires_at <= ?",
                    (now_str,),
                ).fetchall()
            ]
            conn.executemany(
                "DELETE FROM observations WHERE cache_key = ?",
                [(key,) for key in expired],
            )
            conn.executemany(
                "DELETE FROM cache_entries WHERE cache_key = ?",
                [(key,) for key in expired],
            )
            conn.execute("DELETE FROM latest_rates WHERE expires_at <= ?", (now_str,))
        return len(expired)

    def get_cache_status(self) -> dict[str, dict]:
        """Get status of cached data for each key."""
        with self._get_connection() as conn:
            rows = conn.execute("""
                SELECT
                    e.cache_key,
                    e.base,
                    e.target,
                    e.fetched_at,
                    e.expires_at,
                    COUNT(o.date) as observation_count,
                    MIN(o.date) as first_date,
                    MAX(o.date) as last_date
                FROM cache_entries e
                LEFT JOIN observations o ON o.cache_key = e.cache_key
                GROUP BY e.cache_key
            """).fetchall()

        return {
            row["cache_key"]: {
                "pair": f"{row['base']}/{row['target']}",
                "observation_count": row["observation_count"],
                "first_date": row["first_date"],
                "last_date": row["last_date"],
                "fetched_at": row["fetched_at"],
                "expires_at": row["expires_at"],
            }
            for row in rows
        }
