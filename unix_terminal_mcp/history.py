"""Command history service shared by the interpreter and the session."""

import logging

logger = logging.getLogger(__name__)


class CommandHistory:
    """Ordered, append-only log of raw command lines."""

    def __init__(self, entries: list[str] | None = None) -> None:
        self._entries: list[str] = list(entries or [])

    def append(self, command: str) -> None:
        self._entries.append(command)

    def get_all(self) -> list[str]:
        return list(self._entries)

    def clear(self) -> None:
        logger.debug("Clearing %d history entries.", len(self._entries))
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
