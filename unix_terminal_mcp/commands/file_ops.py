from typing import override

from unix_terminal_mcp.filesystem.paths import base_name, get_parent_path, join_path
from unix_terminal_mcp.models.nodes import DirectoryNode, FileNode

from .base import Command, CommandContext, CommandError, CommandResult
from .utils.constants import DEFAULT_LINE_COUNT, PROTECTED_PATHS
from .utils.file_utils import parse_flags, parse_int
from .utils.formatting_utils import OutputLine, Style, error, plain, plain_lines, styled


class CatCommand(Command):
    @override
    def get_name(self) -> str:
        return "cat"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            raise CommandError("cat: missing file operand")

        lines: list[OutputLine] = []
        for arg in args:
            if arg.startswith("-"):
                continue
            try:
                lines.extend(plain_lines(self._read_file(cwd, arg)))
            except CommandError as e:
                lines.append(error(str(e)))
        return CommandResult(lines=lines)


class _LineWindowCommand(Command):
    """Shared argument handling for head and tail: ``[-n <count>] <file>``."""

    def _parse(self, args: list[str]) -> tuple[int, str]:
        count = DEFAULT_LINE_COUNT
        target: str | None = None
        i = 0
        while i < len(args):
            if args[i] == "-n" and i + 1 < len(args) and args[i + 1]:
                # Zero or unparsable counts fall back to the default
                count = parse_int(args[i + 1]) or DEFAULT_LINE_COUNT
                i += 1
            elif not args[i].startswith("-"):
                target = args[i]
            i += 1

        if target is None:
            raise CommandError(f"{self.get_name()}: missing file operand")
        return count, target


class HeadCommand(_LineWindowCommand):
    @override
    def get_name(self) -> str:
        return "head"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        count, target = self._parse(args)
        lines = self._read_file(cwd, target).split("\n")
        return CommandResult(lines=[plain(line) for line in lines[:count]])


class TailCommand(_LineWindowCommand):
    @override
    def get_name(self) -> str:
        return "tail"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        count, target = self._parse(args)
        lines = self._read_file(cwd, target).split("\n")
        return CommandResult(lines=[plain(line) for line in lines[-count:]])


class LessCommand(Command):
    """A non-interactive pager: the whole file followed by an ``(END)`` marker."""

    @override
    def get_name(self) -> str:
        return "less"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            raise CommandError("less: missing file operand")
        lines = plain_lines(self._read_file(cwd, args[0]))
        lines.append(styled("(END)", Style.REVERSE))
        return CommandResult(lines=lines)


class TouchCommand(Command):
    """Creates empty files; existing paths are left untouched."""

    @override
    def get_name(self) -> str:
        return "touch"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            raise CommandError("touch: missing file operand")

        lines: list[OutputLine] = []
        for arg in args:
            if arg.startswith("-"):
                continue
            target_path = self._resolve(cwd, arg)
            if self._tree.exists(target_path):
                continue
            problem = _parent_problem(self._tree, target_path)
            if problem:
                lines.append(error(f"touch: cannot touch '{arg}': {problem}"))
                continue
            self._tree.add_node(target_path, FileNode())
        return CommandResult(lines=lines)


class MkdirCommand(Command):
    """Creates one directory level per argument; there is no ``-p``."""

    @override
    def get_name(self) -> str:
        return "mkdir"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            raise CommandError("mkdir: missing operand")

        lines: list[OutputLine] = []
        for arg in args:
            if arg.startswith("-"):
                continue
            target_path = self._resolve(cwd, arg)
            if self._tree.exists(target_path):
                lines.append(error(f"mkdir: cannot create directory '{arg}': File exists"))
                continue
            problem = _parent_problem(self._tree, target_path)
            if problem:
                lines.append(error(f"mkdir: cannot create directory '{arg}': {problem}"))
                continue
            self._tree.add_node(target_path, DirectoryNode())
        return CommandResult(lines=lines)


class RmCommand(Command):
    """
    Removes files, and directories when ``-r``/``-R`` is given.

    A fixed set of system paths can never be removed.
    """

    @override
    def get_name(self) -> str:
        return "rm"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            raise CommandError("rm: missing operand")

        recursive = False
        targets: list[str] = []
        for arg in args:
            if arg.startswith("-"):
                recursive = recursive or bool(parse_flags(arg) & {"r", "R"})
            else:
                targets.append(arg)
        if not targets:
            raise CommandError("rm: missing operand")

        lines: list[OutputLine] = []
        for target in targets:
            target_path = self._resolve(cwd, target)
            if not self._tree.exists(target_path):
                lines.append(error(f"rm: cannot remove '{target}': No such file or directory"))
            elif target_path in PROTECTED_PATHS:
                lines.append(error(f"rm: cannot remove '{target}': Permission denied"))
            elif self._tree.is_directory(target_path) and not recursive:
                lines.append(error(f"rm: cannot remove '{target}': Is a directory"))
            else:
                self._tree.remove_node(target_path)
        return CommandResult(lines=lines)


class _TransferCommand(Command):
    """Shared operand handling for cp and mv."""

    def _operands(self, args: list[str]) -> tuple[str, str]:
        operands = [arg for arg in args if not arg.startswith("-")]
        if len(operands) < 2:
            raise CommandError(f"{self.get_name()}: missing file operand")
        return operands[0], operands[1]

    def _final_path(self, source_path: str, dest_path: str) -> str:
        """Copying onto an existing directory places the source inside it."""
        if self._tree.is_directory(dest_path):
            return join_path(dest_path, base_name(source_path))
        return dest_path


class CpCommand(_TransferCommand):
    """Copies a single file. Directories are refused."""

    @override
    def get_name(self) -> str:
        return "cp"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        source, dest = self._operands(args)
        source_path = self._resolve(cwd, source)
        node = self._tree.get_node(source_path)
        if node is None:
            raise CommandError(f"cp: cannot stat '{source}': No such file or directory")
        if isinstance(node, DirectoryNode):
            raise CommandError(f"cp: -r not specified; omitting directory '{source}'")

        final_path = self._final_path(source_path, self._resolve(cwd, dest))
        problem = _parent_problem(self._tree, final_path)
        if problem:
            raise CommandError(f"cp: cannot create '{dest}': {problem}")

        self._tree.add_node(final_path, FileNode(content=node.content))
        return CommandResult()


class MvCommand(_TransferCommand):
    """Moves or renames a file or a whole directory."""

    @override
    def get_name(self) -> str:
        return "mv"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        source, dest = self._operands(args)
        source_path = self._resolve(cwd, source)
        node = self._tree.get_node(source_path)
        if node is None:
            raise CommandError(f"mv: cannot stat '{source}': No such file or directory")
        if source_path == "/":
            raise CommandError(f"mv: cannot move '{source}' to '{dest}': Device or resource busy")

        final_path = self._final_path(source_path, self._resolve(cwd, dest))
        if final_path == source_path:
            raise CommandError(f"mv: '{source}' and '{dest}' are the same file")
        if final_path.startswith(source_path + "/"):
            raise CommandError(f"mv: cannot move '{source}' to a subdirectory of itself, '{dest}'")
        problem = _parent_problem(self._tree, final_path)
        if problem:
            raise CommandError(f"mv: cannot move '{source}' to '{dest}': {problem}")

        self._tree.add_node(final_path, node.model_copy(deep=True))
        self._tree.remove_node(source_path)
        return CommandResult()


def _parent_problem(tree, path: str) -> str | None:
    """Describes why ``path`` cannot be created, or None when its parent is a directory."""
    parent_path = get_parent_path(path)
    if not tree.exists(parent_path):
        return "No such file or directory"
    if not tree.is_directory(parent_path):
        return "Not a directory"
    return None
