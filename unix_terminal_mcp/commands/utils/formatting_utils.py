"""
Styled output lines and their ANSI rendering.

Handlers never embed escape codes themselves. They build ``OutputLine``
objects whose spans carry a semantic ``Style``; rendering to the terminal
byte format happens here, in one place.
"""

from enum import StrEnum

from pydantic import BaseModel, Field

from .constants import LINE_SEPARATOR

RESET = "\x1b[0m"


class Style(StrEnum):
    PLAIN = "plain"
    INFO = "info"
    ERROR = "error"
    MATCH = "match"
    DIRECTORY = "directory"
    COMMAND = "command"
    TITLE = "title"
    SECTION = "section"
    HINT = "hint"
    KEY = "key"
    REVERSE = "reverse"
    CONTROL = "control"


# Styles rendered as plain text carry no entry here
ANSI_CODES: dict[Style, str] = {
    Style.ERROR: "\x1b[31m",
    Style.MATCH: "\x1b[31m",
    Style.DIRECTORY: "\x1b[34m",
    Style.COMMAND: "\x1b[32m",
    Style.TITLE: "\x1b[1;33m",
    Style.SECTION: "\x1b[1;36m",
    Style.HINT: "\x1b[90m",
    Style.KEY: "\x1b[36m",
    Style.REVERSE: "\x1b[7m",
}


class Span(BaseModel):
    text: str
    style: Style = Style.PLAIN

    def render(self) -> str:
        code = ANSI_CODES.get(self.style)
        if code is None:
            return self.text
        return f"{code}{self.text}{RESET}"


class OutputLine(BaseModel):
    """One display line, classified by its semantic role."""

    role: Style = Style.PLAIN
    spans: list[Span] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """The line without any styling."""
        return "".join(span.text for span in self.spans)

    def render(self) -> str:
        return "".join(span.render() for span in self.spans)


def styled(text: str, style: Style = Style.PLAIN) -> OutputLine:
    """Builds a single-span line whose role is the span's style."""
    return OutputLine(role=style, spans=[Span(text=text, style=style)])


def plain(text: str) -> OutputLine:
    return styled(text, Style.PLAIN)


def error(text: str) -> OutputLine:
    return styled(text, Style.ERROR)


def info(text: str) -> OutputLine:
    return styled(text, Style.INFO)


def plain_lines(text: str) -> list[OutputLine]:
    """Splits multi-line text into plain display lines."""
    return [plain(line) for line in text.split("\n")]


def render_lines(lines: list[OutputLine]) -> str:
    return LINE_SEPARATOR.join(line.render() for line in lines)


def name_span(name: str, is_dir: bool) -> Span:
    """Directory names are shown in blue, everything else plain."""
    return Span(text=name, style=Style.DIRECTORY if is_dir else Style.PLAIN)


def format_human_size(size: int) -> str:
    """
    Formats a byte count with B/K/M/G suffixes at 1024 thresholds.

    Scaled values keep one decimal, with a trailing ``.0`` stripped.
    """
    if size < 1024:
        return f"{size}B"
    units = ["K", "M", "G"]
    value = size / 1024
    unit = 0
    # Rescale on the rounded value so 1023.96K reads as 1M
    while round(value, 1) >= 1024 and unit < len(units) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}{units[unit]}"


def format_du_size(size: int, human_readable: bool) -> str:
    """du sizes: rounded kilobytes above 1024 bytes when human readable."""
    if human_readable and size > 1024:
        return f"{int(size / 1024 + 0.5)}K"
    return str(size)


def plural(count: int, singular: str, plural_form: str) -> str:
    return f"{count} {singular if count == 1 else plural_form}"
