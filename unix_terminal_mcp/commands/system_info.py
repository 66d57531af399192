"""Commands that print canned system information; none of them touch the tree."""

from datetime import datetime
from typing import override

from unix_terminal_mcp.filesystem.paths import join_path
from unix_terminal_mcp.models.nodes import DirectoryNode

from .base import Command, CommandContext, CommandError, CommandResult
from .utils.constants import DEFAULT_USER, DIRECTORY_SIZE, HOSTNAME
from .utils.formatting_utils import format_du_size, plain

PS_OUTPUT = [
    "  PID TTY          TIME CMD",
    "    1 ?        00:00:01 systemd",
    "  234 ?        00:00:00 sshd",
    "  456 ?        00:00:02 nginx",
    "  789 pts/0    00:00:00 bash",
    " 1024 pts/0    00:00:00 ps",
]

PS_AUX_OUTPUT = [
    "USER       PID %CPU %MEM    VSZ   RSS TTY      STAT START   TIME COMMAND",
    "root         1  0.0  0.1 169836 13256 ?        Ss   09:00   0:01 /sbin/init",
    "root       234  0.0  0.0  15852  1024 ?        Ss   09:00   0:00 /usr/sbin/sshd",
    "www-data   456  0.1  0.2  55896  4532 ?        S    09:01   0:02 nginx: worker",
    "user       789  0.0  0.1  23456  2048 pts/0    Ss   09:05   0:00 -bash",
    "user      1024  0.0  0.0  12345   896 pts/0    R+   09:30   0:00 ps aux",
]

DF_OUTPUT = [
    "Filesystem     1K-blocks    Used Available Use% Mounted on",
    "/dev/sda1       51475068 8234512  40602504  17% /",
    "tmpfs            4086844       0   4086844   0% /dev/shm",
    "/dev/sda2      102948436 2458932  95237220   3% /home",
]

DF_HUMAN_OUTPUT = [
    "Filesystem      Size  Used Avail Use% Mounted on",
    "/dev/sda1        50G  7.9G   39G  17% /",
    "tmpfs           3.9G     0  3.9G   0% /dev/shm",
    "/dev/sda2        99G  2.4G   91G   3% /home",
]

UNAME_FULL = f"Linux {HOSTNAME} 5.15.0-generic #1 SMP x86_64 GNU/Linux"
UPTIME_OUTPUT = " 10:30:00 up 1 day,  2:15,  1 user,  load average: 0.08, 0.12, 0.10"


class WhoamiCommand(Command):
    @override
    def get_name(self) -> str:
        return "whoami"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        return CommandResult(lines=[plain(DEFAULT_USER)])


class PsCommand(Command):
    @override
    def get_name(self) -> str:
        return "ps"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        rows = PS_AUX_OUTPUT if "aux" in args or "-aux" in args else PS_OUTPUT
        return CommandResult(lines=[plain(row) for row in rows])


class KillCommand(Command):
    """Pretends to signal a process; only PID 1 is refused."""

    @override
    def get_name(self) -> str:
        return "kill"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            raise CommandError("kill: usage: kill <pid>")
        if args[-1] == "1":
            raise CommandError("kill: (1) - Operation not permitted")
        return CommandResult()


class DfCommand(Command):
    @override
    def get_name(self) -> str:
        return "df"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        rows = DF_HUMAN_OUTPUT if "-h" in args else DF_OUTPUT
        return CommandResult(lines=[plain(row) for row in rows])


class DuCommand(Command):
    """
    Disk usage of a directory tree.

    Every directory costs a fixed 4096 bytes plus the size of its children;
    files cost their content length. One line is printed per directory.
    """

    @override
    def get_name(self) -> str:
        return "du"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        human_readable = False
        target_arg: str | None = None
        target_path = cwd
        for arg in args:
            if arg == "-h":
                human_readable = True
            elif not arg.startswith("-"):
                target_arg = arg
                target_path = self._resolve(cwd, arg)

        node = self._tree.get_node(target_path)
        if node is None:
            shown = target_arg if target_arg is not None else target_path
            raise CommandError(f"du: cannot access '{shown}': No such file or directory")
        if not isinstance(node, DirectoryNode):
            # Only directories get a line
            return CommandResult()

        results: list[str] = []
        self._calc_size(target_path, node, human_readable, results)
        results.reverse()
        return CommandResult(lines=[plain(row) for row in results])

    def _calc_size(self, path: str, node, human_readable: bool, results: list[str]) -> int:
        if not isinstance(node, DirectoryNode):
            return len(node.content)

        total = DIRECTORY_SIZE
        for name, child in node.children.items():
            total += self._calc_size(join_path(path, name), child, human_readable, results)

        # Appended after the children; the caller reverses the whole list
        results.append(f"{format_du_size(total, human_readable)}\t{path}")
        return total


class UnameCommand(Command):
    @override
    def get_name(self) -> str:
        return "uname"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        return CommandResult(lines=[plain(UNAME_FULL if "-a" in args else "Linux")])


class UptimeCommand(Command):
    @override
    def get_name(self) -> str:
        return "uptime"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        return CommandResult(lines=[plain(UPTIME_OUTPUT)])


class DateCommand(Command):
    @override
    def get_name(self) -> str:
        return "date"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        now = datetime.now().astimezone()
        return CommandResult(lines=[plain(now.strftime("%a %b %d %H:%M:%S %Z %Y"))])
