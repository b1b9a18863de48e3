"""Voice shopping commands - from transcript to shopping-list action

Components:
    models.py: Data models (IntentType, ExtractedItem, VoiceCommandResult)
    lexicon.py: Per-language keyword tables
    parser/: Normalization, segmentation, entity extraction, intent
        classification and dispatch
    commands/: Intent handlers (item and list commands)
    responses.py: Per-language confirmation templates
    pipeline.py: VoicePipeline orchestrating the stages
    history.py: SQLite command history
    languages.py: Supported-language listing
    config.py: args/voice.yaml loading

Usage:
    from shopvoice.voice.pipeline import build_pipeline

    pipeline = build_pipeline()
    result = await pipeline.process_command("add milk and bread", user_id="alice")
    print(result.response)
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent.parent
ARGS_DIR = PROJECT_ROOT / "args"
DB_PATH = PROJECT_ROOT / "data" / "voice.db"
CONFIG_PATH = ARGS_DIR / "voice.yaml"


def get_connection(db_path: Path | str | None = None) -> sqlite3.Connection:
    """Get database connection, creating tables on first use."""
    path = Path(db_path) if db_path else DB_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    _ensure_tables(conn)
    return conn


def _ensure_tables(conn: sqlite3.Connection) -> None:
    """Create voice tables if they don't exist."""
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS voice_commands (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            command_text TEXT NOT NULL,
            language TEXT,
            intent TEXT,
            success BOOLEAN DEFAULT TRUE,
            processed_at DATETIME DEFAULT CURRENT_TIMESTAMP
        );

        CREATE INDEX IF NOT EXISTS idx_voice_commands_user
            ON voice_commands(user_id, processed_at);
        CREATE INDEX IF NOT EXISTS idx_voice_commands_intent
            ON voice_commands(intent);
    """)
    conn.commit()


__all__ = [
    "ARGS_DIR",
    "CONFIG_PATH",
    "DB_PATH",
    "PROJECT_ROOT",
    "get_connection",
]
