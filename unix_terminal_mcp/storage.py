"""
Disk persistence for the terminal state.

Each key is stored as its own JSON document under one directory. Loading is
best effort: a document that is missing, unreadable or malformed is treated
as absent so a broken file never prevents the terminal from starting.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .commands.utils.constants import MAX_HISTORY_ENTRIES, MAX_LESSON, MIN_LESSON

logger = logging.getLogger(__name__)

FILE_SYSTEM_KEY = "file_system"
CURRENT_PATH_KEY = "current_path"
CURRENT_SESSION_KEY = "current_session"
COMMAND_HISTORY_KEY = "command_history"

ALL_KEYS = (FILE_SYSTEM_KEY, CURRENT_PATH_KEY, CURRENT_SESSION_KEY, COMMAND_HISTORY_KEY)


class JsonFileStorage:
    """Stores terminal state as JSON files in ``storage_dir``."""

    def __init__(self, storage_dir: Path) -> None:
        self._storage_dir = Path(storage_dir).expanduser()

    def _key_path(self, key: str) -> Path:
        return self._storage_dir / f"{key}.json"

    def _get_item(self, key: str) -> Any | None:
        path = self._key_path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not load stored %s from %s: %s", key, path, e)
            return None

    def _set_item(self, key: str, value: Any) -> None:
        path = self._key_path(key)
        try:
            self._storage_dir.mkdir(parents=True, exist_ok=True)
            # The document is swapped in whole; readers never see a partial write
            tmp_path = path.with_name(path.name + ".tmp")
            tmp_path.write_text(json.dumps(value), encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            logger.warning("Could not save %s to %s: %s", key, path, e)

    # --- File system ---

    def load_file_system(self) -> dict | None:
        image = self._get_item(FILE_SYSTEM_KEY)
        return image if isinstance(image, dict) else None

    def save_file_system(self, image: dict) -> None:
        self._set_item(FILE_SYSTEM_KEY, image)

    # --- Current path ---

    def load_current_path(self) -> str | None:
        path = self._get_item(CURRENT_PATH_KEY)
        return path if isinstance(path, str) and path else None

    def save_current_path(self, path: str) -> None:
        self._set_item(CURRENT_PATH_KEY, path)

    # --- Current lesson ---

    def load_current_session(self) -> int | None:
        session = self._get_item(CURRENT_SESSION_KEY)
        if isinstance(session, int) and not isinstance(session, bool) and MIN_LESSON <= session <= MAX_LESSON:
            return session
        return None

    def save_current_session(self, session: int) -> None:
        self._set_item(CURRENT_SESSION_KEY, session)

    # --- Command history ---

    def load_command_history(self) -> list[str] | None:
        history = self._get_item(COMMAND_HISTORY_KEY)
        if not isinstance(history, list):
            return None
        return [str(entry) for entry in history]

    def save_command_history(self, history: list[str]) -> None:
        # Only the newest entries are kept
        self._set_item(COMMAND_HISTORY_KEY, history[-MAX_HISTORY_ENTRIES:])

    # --- Reset ---

    def reset_all(self) -> None:
        for key in ALL_KEYS:
            try:
                self._key_path(key).unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Could not remove stored %s: %s", key, e)
