"""Voice command history.

The pipeline only needs ``record_command``; history queries and stats back
the CLI. SQLite calls run in a worker thread so recording never blocks the
event loop.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from pathlib import Path
from typing import Any, Protocol

from shopvoice.voice import get_connection

logger = logging.getLogger(__name__)


class CommandRecorder(Protocol):
    """Where the pipeline sends raw commands. Failures are the caller's to log."""

    async def record_command(self, user_id: str, text: str, **details: Any) -> None:
        ...


class HistoryStore:
    """SQLite-backed command history."""

    def __init__(self, db_path: Path | str | None = None):
        self.db_path = db_path

    async def record_command(
        self,
        user_id: str,
        text: str,
        *,
        language: str | None = None,
        intent: str | None = None,
        success: bool = True,
    ) -> None:
        await asyncio.to_thread(self._insert, user_id, text, language, intent, success)

    def _insert(
        self,
        user_id: str,
        text: str,
        language: str | None,
        intent: str | None,
        success: bool,
    ) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """INSERT INTO voice_commands
                   (id, user_id, command_text, language, intent, success)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (str(uuid.uuid4()), str(user_id), text, language, intent, success),
            )
            conn.commit()
        finally:
            conn.close()

    def get_history(self, user_id: str, limit: int = 50) -> list[dict[str, Any]]:
        """Most recent commands for a user, newest first."""
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                """SELECT command_text, language, intent, processed_at, success
                   FROM voice_commands
                   WHERE user_id = ?
                   ORDER BY processed_at DESC, rowid DESC
                   LIMIT ?""",
                (str(user_id), limit),
            ).fetchall()
        finally:
            conn.close()

        history = []
        for row in rows:
            entry = dict(row)
            entry["success"] = bool(entry["success"])
            history.append(entry)
        return history

    def get_stats(self, user_id: str) -> dict[str, Any]:
        """Command counts and success rate (0-100) for a user."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                """SELECT
                     COUNT(*) AS total_commands,
                     COUNT(CASE WHEN success = 1 THEN 1 END) AS successful_commands,
                     COUNT(CASE WHEN success = 0 THEN 1 END) AS failed_commands,
                     AVG(CASE WHEN success = 1 THEN 1.0 ELSE 0.0 END) * 100 AS success_rate
                   FROM voice_commands
                   WHERE user_id = ?""",
                (str(user_id),),
            ).fetchone()
        finally:
            conn.close()

        stats = dict(row)
        stats["success_rate"] = round(stats["success_rate"] or 0)
        return stats


__all__ = ["CommandRecorder", "HistoryStore"]
