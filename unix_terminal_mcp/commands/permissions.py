from typing import override

from .base import Command, CommandContext, CommandError, CommandResult
from .utils.file_utils import is_directory_node, mode_to_permissions


class ChmodCommand(Command):
    """
    ``chmod <mode> <target>`` with a 3-digit octal mode.

    Any other mode format is ignored without an error message.
    """

    @override
    def get_name(self) -> str:
        return "chmod"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if len(args) < 2:
            raise CommandError("chmod: missing operand")

        mode, target = args[0], args[1]
        target_path = self._resolve(cwd, target)
        node = self._tree.get_node(target_path)
        if node is None:
            raise CommandError(f"chmod: cannot access '{target}': No such file or directory")

        permissions = mode_to_permissions(mode, is_directory_node(node))
        if permissions is not None:
            self._tree.set_permissions(target_path, permissions)
        return CommandResult()


class ChownCommand(Command):
    """``chown <owner[:group]> <target>``; the group is kept when omitted."""

    @override
    def get_name(self) -> str:
        return "chown"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if len(args) < 2:
            raise CommandError("chown: missing operand")

        spec, target = args[0], args[1]
        target_path = self._resolve(cwd, target)
        if not self._tree.exists(target_path):
            raise CommandError(f"chown: cannot access '{target}': No such file or directory")

        parts = spec.split(":")
        group = parts[1] if len(parts) > 1 and parts[1] else None
        self._tree.set_owner(target_path, parts[0], group)
        return CommandResult()
