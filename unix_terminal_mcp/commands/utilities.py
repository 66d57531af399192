import re
from typing import override

from .base import Command, CommandContext, CommandResult
from .utils.constants import HOME_PATH, MAX_LESSON, MIN_LESSON
from .utils.formatting_utils import OutputLine, Span, Style, info, plain, styled

CLEAR_SCREEN = "\x1b[2J\x1b[H"

RULE_WIDTH = 78
USAGE_WIDTH = 17
DESCRIPTION_WIDTH = 32

# (section title, header style, rows of (usage, description, examples))
HELP_SECTIONS: list[tuple[str, Style, list[tuple[str, str, list[str]]]]] = [
    (
        "Navigation",
        Style.SECTION,
        [
            ("pwd", "Print working directory", ["pwd"]),
            ("ls", "List directory contents", ["ls -la"]),
            ("cd <path>", "Change directory", ["cd documents", "cd ..", "cd ~"]),
            ("tree", "Show directory tree", ["tree -L 2"]),
        ],
    ),
    (
        "File Operations",
        Style.SECTION,
        [
            ("cat <file>", "Display file contents", ["cat notes.txt"]),
            ("head <file>", "Show first 10 lines", ["head -n 5 log.txt"]),
            ("tail <file>", "Show last 10 lines", ["tail -n 20 log.txt"]),
            ("less <file>", "View file (paged)", ["less /var/log/syslog"]),
            ("touch <file>", "Create empty file", ["touch newfile.txt"]),
            ("mkdir <dir>", "Create directory", ["mkdir projects"]),
            ("cp <src> <dest>", "Copy file", ["cp file.txt backup.txt"]),
            ("mv <src> <dest>", "Move or rename file", ["mv old.txt new.txt"]),
            ("rm <file>", "Remove file", ["rm unwanted.txt"]),
            ("rm -r <dir>", "Remove directory", ["rm -r old_folder"]),
        ],
    ),
    (
        "Search & Text",
        Style.SECTION,
        [
            ("grep <pat> <file>", "Search for pattern", ["grep error /var/log/syslog"]),
            ("find <path> -name", "Find files by name", ['find . -name "*.txt"']),
            ("wc <file>", "Count lines/words/chars", ["wc notes.txt"]),
            ("echo <text>", "Print text", ['echo "Hello World"']),
        ],
    ),
    (
        "System Info",
        Style.SECTION,
        [
            ("whoami", "Print current user", ["whoami"]),
            ("ps", "List processes", ["ps aux"]),
            ("kill <pid>", "Terminate process", ["kill 1234"]),
            ("df", "Show disk space", ["df -h"]),
            ("du", "Show directory size", ["du -h documents"]),
            ("uname", "System information", ["uname -a"]),
            ("uptime", "System uptime", ["uptime"]),
            ("date", "Show current date", ["date"]),
        ],
    ),
    (
        "Permissions",
        Style.SECTION,
        [
            ("chmod <mode>", "Change permissions", ["chmod 755 script.sh"]),
            ("chown <user>", "Change owner", ["chown user:group file.txt"]),
        ],
    ),
    (
        "Utilities",
        Style.SECTION,
        [
            ("history", "Show command history", ["history"]),
            ("clear", "Clear the screen", ["clear"]),
            ("reset", "Restore the original files", ["reset"]),
            ("help", "Show this message", ["help"]),
        ],
    ),
    (
        "Course Navigation",
        Style.SECTION,
        [
            ("lesson <n>", "Go to session n", ["lesson 3"]),
            ("lesson next", "Go to next session", ["lesson next"]),
            ("lesson prev", "Go to previous session", ["lesson prev"]),
            ("lesson list", "List all sessions", ["lesson list"]),
        ],
    ),
]

KEYBOARD_SHORTCUTS = [
    ("Tab", "Auto-complete commands & paths"),
    ("↑ / ↓", "Browse command history"),
    ("Ctrl+C", "Cancel current input"),
    ("Ctrl+L", "Clear screen"),
    ("Ctrl+V", "Paste from clipboard"),
]

LESSON_TITLES = [
    "Overview & Getting Started",
    "Navigation & File System Basics",
    "File Operations & Viewing Content",
    "Text Processing & Searching",
    "System Information & Processes",
    "Permissions & Practical Workflows",
]

LESSON_RANGE = f"{MIN_LESSON}-{MAX_LESSON}"


class HistoryCommand(Command):
    @override
    def get_name(self) -> str:
        return "history"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        entries = context.history.get_all() if context.history is not None else []
        return CommandResult(lines=[plain(f"  {i}  {entry}") for i, entry in enumerate(entries, start=1)])


class ClearCommand(Command):
    @override
    def get_name(self) -> str:
        return "clear"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        return CommandResult(lines=[styled(CLEAR_SCREEN, Style.CONTROL)])


class HelpCommand(Command):
    @override
    def get_name(self) -> str:
        return "help"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        rule = "═" * RULE_WIDTH
        lines = [
            plain(""),
            styled(rule, Style.TITLE),
            styled("UNIX COMMAND REFERENCE".center(RULE_WIDTH), Style.TITLE),
            styled(rule, Style.TITLE),
            plain(""),
        ]
        for title, header_style, rows in HELP_SECTIONS:
            lines.append(styled(f"─── {title} ".ljust(RULE_WIDTH, "─"), header_style))
            lines.extend(self._row(usage, description, examples) for usage, description, examples in rows)
            lines.append(plain(""))

        lines.append(styled("─── Keyboard Shortcuts ".ljust(RULE_WIDTH, "─"), Style.TITLE))
        for key, description in KEYBOARD_SHORTCUTS:
            lines.append(
                OutputLine(
                    spans=[
                        Span(text="  "),
                        Span(text=key, style=Style.KEY),
                        Span(text=" " * (USAGE_WIDTH - len(key)) + description),
                    ]
                )
            )
        lines.append(plain(""))
        return CommandResult(lines=lines)

    @staticmethod
    def _row(usage: str, description: str, examples: list[str]) -> OutputLine:
        gap = " " * max(USAGE_WIDTH - len(usage), 2)
        spans = [
            Span(text="  "),
            Span(text=usage, style=Style.COMMAND),
            Span(text=gap + description.ljust(DESCRIPTION_WIDTH)),
        ]
        for i, example in enumerate(examples):
            if i:
                spans.append(Span(text="  "))
            spans.append(Span(text=example, style=Style.HINT))
        return OutputLine(spans=spans)


class LessonCommand(Command):
    """
    Moves between course lessons: ``lesson <n|next|prev|list>``.

    The lesson index itself belongs to the caller; this command only asks
    for a change through ``context.on_lesson_change``.
    """

    @override
    def get_name(self) -> str:
        return "lesson"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            return CommandResult(
                lines=[
                    info(f"Usage: lesson [{LESSON_RANGE}|next|prev|list]"),
                    info("Examples:"),
                    info("  lesson 1     - Go to Session 1"),
                    info("  lesson next  - Go to next session"),
                    info("  lesson list  - List all sessions"),
                ]
            )

        arg = args[0].lower()
        if arg == "list":
            lines = [info("Available Sessions:")]
            lines.extend(info(f"  {i}. {title}") for i, title in enumerate(LESSON_TITLES))
            return CommandResult(lines=lines)

        if arg == "next":
            return self._move_to(min(context.current_lesson + 1, MAX_LESSON), context)
        if arg == "prev":
            return self._move_to(max(context.current_lesson - 1, MIN_LESSON), context)
        if re.fullmatch(r"\d+", arg) and MIN_LESSON <= int(arg) <= MAX_LESSON:
            return self._move_to(int(arg), context)

        return CommandResult(lines=[info(f"Invalid session. Use: lesson [{LESSON_RANGE}|next|prev|list]")])

    @staticmethod
    def _move_to(lesson: int, context: CommandContext) -> CommandResult:
        if context.on_lesson_change is not None:
            context.on_lesson_change(lesson)
        return CommandResult(lines=[info(f"Moved to Session {lesson}")])


class ResetCommand(Command):
    """Restores the seed filesystem and returns to the home directory."""

    @override
    def get_name(self) -> str:
        return "reset"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        self._tree.reset()
        if context.on_reset is not None:
            context.on_reset()
        return CommandResult(lines=[info("Filesystem reset to its initial state.")], new_path=HOME_PATH)
