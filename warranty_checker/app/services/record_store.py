"""
Generic content record store.

Records have a ``type``, a ``title`` and any number of string fields
kept in ``record_meta``.  The lookup flow only uses ``find_one`` and
``get_field``; the write helpers serve the record management API and
the CSV import script.

``find_one`` matches filters with SQL ``=`` on TEXT columns, which in
SQLite uses the BINARY collation: matching is exact and case sensitive.
No ``ORDER BY`` is applied, so when several records satisfy the filters
the one returned is whichever SQLite yields first.  Callers must not
rely on that order.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from warranty_checker.app.core.db import get_connection


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    id: int
    type: str
    title: str
    created_at: str
    updated_at: str


class RecordStore:
    """Read and write content records in the SQLite database."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def _connect(self) -> sqlite3.Connection:
        return get_connection(self.database_url)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_one(self, record_type: str, filters: Sequence[Tuple[str, str]]) -> Optional[Record]:
        """Return the first record of ``record_type`` whose fields equal all ``filters``.

        ``filters`` is a sequence of ``(meta_key, value)`` pairs combined
        with AND.
        """
        joins = []
        params: List[str] = []
        for index, (meta_key, value) in enumerate(filters):
            alias = f"m{index}"
            joins.append(
                f"JOIN record_meta {alias} ON {alias}.record_id = r.id"
                f" AND {alias}.meta_key = ? AND {alias}.meta_value = ?"
            )
            params.extend([meta_key, value])
        query = (
            "SELECT r.* FROM records r "
            + " ".join(joins)
            + " WHERE r.type = ? LIMIT 1"
        )
        params.append(record_type)

        conn = self._connect()
        try:
            row = conn.execute(query, params).fetchone()
            return self._row_to_record(row) if row else None
        finally:
            conn.close()

    def get_field(self, record_id: int, meta_key: str) -> Optional[str]:
        """Return a single field value, or ``None`` when the field is not set."""
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT meta_value FROM record_meta WHERE record_id = ? AND meta_key = ?",
                (record_id, meta_key),
            ).fetchone()
            return row["meta_value"] if row else None
        finally:
            conn.close()

    def get_fields(self, record_id: int) -> Dict[str, Optional[str]]:
        """Return all fields of a record as a dictionary."""
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT meta_key, meta_value FROM record_meta WHERE record_id = ?",
                (record_id,),
            ).fetchall()
            return {row["meta_key"]: row["meta_value"] for row in rows}
        finally:
            conn.close()

    def get(self, record_type: str, record_id: int) -> Optional[Record]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT * FROM records WHERE id = ? AND type = ?",
                (record_id, record_type),
            ).fetchone()
            return self._row_to_record(row) if row else None
        finally:
            conn.close()

    def list_records(self, record_type: str, limit: int = 100, offset: int = 0) -> List[Record]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT * FROM records WHERE type = ? ORDER BY id ASC LIMIT ? OFFSET ?",
                (record_type, limit, offset),
            ).fetchall()
            return [self._row_to_record(row) for row in rows]
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def insert(self, record_type: str, title: str, fields: Mapping[str, Optional[str]]) -> int:
        """Insert a record with its fields and return the new id.

        Fields whose value is ``None`` are not stored.
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO records (type, title) VALUES (?, ?)",
                (record_type, title),
            )
            record_id = cursor.lastrowid
            cursor.executemany(
                "INSERT INTO record_meta (record_id, meta_key, meta_value) VALUES (?, ?, ?)",
                [(record_id, key, value) for key, value in fields.items() if value is not None],
            )
            conn.commit()
            logger.info("Created %s record %s", record_type, record_id)
            return record_id
        finally:
            conn.close()

    def update(
        self,
        record_type: str,
        record_id: int,
        title: Optional[str] = None,
        fields: Optional[Mapping[str, Optional[str]]] = None,
    ) -> bool:
        """Update the title and/or fields of a record.

        Fields whose value is ``None`` are left untouched.  Returns
        ``False`` if the record does not exist.
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                "SELECT id FROM records WHERE id = ? AND type = ?",
                (record_id, record_type),
            ).fetchone()
            if not row:
                return False
            if title is not None:
                cursor.execute("UPDATE records SET title = ? WHERE id = ?", (title, record_id))
            for key, value in (fields or {}).items():
                if value is None:
                    continue
                cursor.execute(
                    "INSERT INTO record_meta (record_id, meta_key, meta_value) VALUES (?, ?, ?)"
                    " ON CONFLICT(record_id, meta_key) DO UPDATE SET meta_value = excluded.meta_value",
                    (record_id, key, value),
                )
            cursor.execute(
                "UPDATE records SET updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (record_id,),
            )
            conn.commit()
            logger.info("Updated %s record %s", record_type, record_id)
            return True
        finally:
            conn.close()

    def delete(self, record_type: str, record_id: int) -> bool:
        """Delete a record and its fields.  Returns ``True`` if something was deleted."""
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "DELETE FROM records WHERE id = ? AND type = ?",
                (record_id, record_type),
            )
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted %s record %s", record_type, record_id)
            return affected > 0
        finally:
            conn.close()

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> Record:
        return Record(
            id=row["id"],
            type=row["type"],
            title=row["title"],
            created_at=str(row["created_at"]),
            updated_at=str(row["updated_at"]),
        )
