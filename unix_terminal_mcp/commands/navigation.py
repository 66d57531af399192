from typing import override

from unix_terminal_mcp.filesystem.paths import base_name, join_path
from unix_terminal_mcp.models.nodes import DirectoryNode

from .base import Command, CommandContext, CommandError, CommandResult
from .utils.constants import HOME_PATH, LONG_FORMAT_DATE
from .utils.file_utils import get_node_info, parse_flags, parse_int, sort_entries
from .utils.formatting_utils import (
    OutputLine,
    Span,
    Style,
    format_human_size,
    name_span,
    plain,
    plural,
    styled,
)


class PwdCommand(Command):
    @override
    def get_name(self) -> str:
        return "pwd"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        return CommandResult(lines=[plain(cwd)])


class LsCommand(Command):
    """
    Lists directory contents.

    Flags: ``-a`` shows dotfiles, ``-l`` the long format, ``-h`` human
    readable sizes in the long format. Flags may be combined (``-lah``).
    """

    @override
    def get_name(self) -> str:
        return "ls"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        flags: set[str] = set()
        target_arg: str | None = None
        target_path = cwd
        for arg in args:
            if arg.startswith("-"):
                flags |= parse_flags(arg)
            else:
                target_arg = arg
                target_path = self._resolve(cwd, arg)

        children = self._tree.get_directory_children(target_path)
        if children is None:
            node = self._tree.get_node(target_path)
            if node is not None:
                return CommandResult(lines=[plain(base_name(target_path))])
            shown = target_arg if target_arg is not None else target_path
            raise CommandError(f"ls: cannot access '{shown}': No such file or directory")

        names = list(children)
        if "a" not in flags:
            names = [name for name in names if not name.startswith(".")]
        if not names:
            return CommandResult()
        names = sort_entries(children, names)

        if "l" in flags:
            lines = [self._long_line(name, children[name], "h" in flags) for name in names]
            return CommandResult(lines=lines)

        spans: list[Span] = []
        for i, name in enumerate(names):
            if i:
                spans.append(Span(text="  "))
            spans.append(name_span(name, isinstance(children[name], DirectoryNode)))
        return CommandResult(lines=[OutputLine(spans=spans)])

    @staticmethod
    def _long_line(name: str, node, human_readable: bool) -> OutputLine:
        info = get_node_info(name, node)
        if human_readable:
            size = format_human_size(info["size"]).rjust(5)
        elif info["is_dir"]:
            size = str(info["size"])
        else:
            size = str(info["size"]).rjust(5)
        prefix = f"{info['permissions']}  1 {info['owner']} {info['group']} {size} {LONG_FORMAT_DATE} "
        return OutputLine(spans=[Span(text=prefix), name_span(name, info["is_dir"])])


class CdCommand(Command):
    @override
    def get_name(self) -> str:
        return "cd"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args or args[0] == "~":
            return CommandResult(new_path=HOME_PATH)

        target_path = self._resolve(cwd, args[0])
        if not self._tree.exists(target_path):
            raise CommandError(f"cd: {args[0]}: No such file or directory")
        if not self._tree.is_directory(target_path):
            raise CommandError(f"cd: {args[0]}: Not a directory")
        return CommandResult(new_path=target_path)


class TreeCommand(Command):
    """
    Renders a directory hierarchy with box-drawing connectors.

    ``-L <n>`` limits the depth, ``-d`` lists directories only and ``-a``
    includes dotfiles.
    """

    @override
    def get_name(self) -> str:
        return "tree"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        max_depth: int | None = None
        flags: set[str] = set()
        target_arg: str | None = None

        i = 0
        while i < len(args):
            arg = args[i]
            if arg == "-L":
                if i + 1 >= len(args):
                    raise CommandError("tree: Missing argument to -L option.")
                max_depth = parse_int(args[i + 1])
                if max_depth is None or max_depth < 1:
                    raise CommandError("tree: Invalid level, must be greater than 0.")
                i += 1
            elif arg.startswith("-"):
                flags |= parse_flags(arg)
            else:
                target_arg = arg
            i += 1

        target_path = cwd if target_arg is None else self._resolve(cwd, target_arg)
        shown = target_arg if target_arg is not None else target_path
        node = self._tree.get_node(target_path)
        if node is None:
            raise CommandError(f"tree: {shown}: No such file or directory")
        if not isinstance(node, DirectoryNode):
            raise CommandError(f"tree: {shown}: Not a directory")

        lines = [styled("." if target_arg is None else target_arg, Style.DIRECTORY)]
        counts = {"dirs": 0, "files": 0}
        self._walk(target_path, "", 1, max_depth, flags, lines, counts)

        summary = plural(counts["dirs"], "directory", "directories")
        if "d" not in flags:
            summary += ", " + plural(counts["files"], "file", "files")
        lines.append(plain(""))
        lines.append(plain(summary))
        return CommandResult(lines=lines)

    def _walk(
        self,
        path: str,
        prefix: str,
        depth: int,
        max_depth: int | None,
        flags: set[str],
        lines: list[OutputLine],
        counts: dict[str, int],
    ) -> None:
        if max_depth is not None and depth > max_depth:
            return
        children = self._tree.get_directory_children(path) or {}
        names = list(children)
        if "a" not in flags:
            names = [name for name in names if not name.startswith(".")]
        if "d" in flags:
            names = [name for name in names if isinstance(children[name], DirectoryNode)]
        names = sort_entries(children, names)

        for i, name in enumerate(names):
            is_last = i == len(names) - 1
            is_dir = isinstance(children[name], DirectoryNode)
            connector = "└── " if is_last else "├── "
            lines.append(OutputLine(spans=[Span(text=prefix + connector), name_span(name, is_dir)]))
            if is_dir:
                counts["dirs"] += 1
                extension = "    " if is_last else "│   "
                self._walk(join_path(path, name), prefix + extension, depth + 1, max_depth, flags, lines, counts)
            else:
                counts["files"] += 1
