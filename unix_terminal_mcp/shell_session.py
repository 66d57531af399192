"""
A terminal session: the state a front end keeps around the interpreter.

The session owns the current directory, the lesson index and the command
history, applies ``new_path`` results, and mirrors everything to storage
after each command when a storage backend is configured.
"""

import logging

from pydantic import ValidationError

from .commands.base import CommandContext, CommandResult
from .filesystem.tree import FileSystemTree
from .history import CommandHistory
from .interpreter import CommandInterpreter, Completion
from .models.session import ShellState
from .storage import JsonFileStorage

logger = logging.getLogger(__name__)


class ShellSession:
    """Runs command lines against one filesystem tree."""

    def __init__(self, storage: JsonFileStorage | None = None) -> None:
        self.tree = FileSystemTree()
        self.history = CommandHistory()
        self.state = ShellState()
        self.interpreter = CommandInterpreter(self.tree)
        self._storage = storage
        if storage is not None:
            self._hydrate(storage)

    def _hydrate(self, storage: JsonFileStorage) -> None:
        image = storage.load_file_system()
        if image is not None:
            try:
                self.tree.load_image(image)
            except ValidationError as e:
                logger.warning("Stored filesystem is invalid, using the seed layout: %s", e)

        cwd = storage.load_current_path()
        if cwd is not None and self.tree.is_directory(cwd):
            self.state.cwd = cwd

        lesson = storage.load_current_session()
        if lesson is not None:
            self.state.lesson = lesson

        entries = storage.load_command_history()
        if entries:
            self.history = CommandHistory(entries)
        logger.info("Session restored: cwd=%s lesson=%d history=%d", self.state.cwd, self.state.lesson, len(self.history))

    @property
    def cwd(self) -> str:
        return self.state.cwd

    def run(self, line: str) -> CommandResult:
        """Records, executes and persists one submitted line."""
        if line.strip():
            self.history.append(line)

        context = CommandContext(
            history=self.history,
            current_lesson=self.state.lesson,
            on_lesson_change=self._set_lesson,
            on_reset=self._forget_stored_state,
        )
        result = self.interpreter.execute_command(line, self.state.cwd, context)
        if result.new_path is not None:
            self.state.cwd = result.new_path
        self._persist()
        return result

    def complete(self, buffer: str) -> Completion:
        return self.interpreter.complete(buffer, self.state.cwd)

    def snapshot(self) -> dict:
        """A serializable image of the current tree."""
        return self.tree.to_image()

    def reset(self) -> None:
        """Back to the seed tree, home directory, first lesson and an empty history."""
        self.tree.reset()
        self.state = ShellState()
        self._forget_stored_state()

    def _set_lesson(self, lesson: int) -> None:
        self.state.lesson = lesson

    def _forget_stored_state(self) -> None:
        self.history.clear()
        if self._storage is not None:
            self._storage.reset_all()

    def _persist(self) -> None:
        if self._storage is None:
            return
        self._storage.save_file_system(self.tree.to_image())
        self._storage.save_current_path(self.state.cwd)
        self._storage.save_current_session(self.state.lesson)
        self._storage.save_command_history(self.history.get_all())
