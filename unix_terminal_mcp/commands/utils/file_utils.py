import re

from unix_terminal_mcp.models.nodes import DirectoryNode, FileNode

from .constants import (
    DEFAULT_DIR_PERMISSIONS,
    DEFAULT_FILE_PERMISSIONS,
    DEFAULT_GROUP,
    DEFAULT_USER,
    DIRECTORY_SIZE,
)

# One octal digit -> rwx triplet
MODE_BITS = {
    "7": "rwx",
    "6": "rw-",
    "5": "r-x",
    "4": "r--",
    "3": "-wx",
    "2": "-w-",
    "1": "--x",
    "0": "---",
}

OCTAL_MODE_PATTERN = re.compile(r"^[0-7]{3}$")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def is_directory_node(node: FileNode | DirectoryNode | None) -> bool:
    return isinstance(node, DirectoryNode)


def mode_to_permissions(mode: str, is_dir: bool) -> str | None:
    """
    Converts a 3-digit octal mode such as ``755`` into ``drwxr-xr-x``.

    Returns None when the mode is not exactly three octal digits.
    """
    if not OCTAL_MODE_PATTERN.match(mode):
        return None
    prefix = "d" if is_dir else "-"
    return prefix + "".join(MODE_BITS[digit] for digit in mode)


def get_node_info(name: str, node: FileNode | DirectoryNode) -> dict:
    """Get the display metadata of a node, applying defaults for missing fields."""
    is_dir = is_directory_node(node)
    if node.size is not None:
        size = node.size
    elif is_dir:
        size = DIRECTORY_SIZE
    else:
        size = len(node.content)
    return {
        "name": name,
        "is_dir": is_dir,
        "permissions": node.permissions or (DEFAULT_DIR_PERMISSIONS if is_dir else DEFAULT_FILE_PERMISSIONS),
        "owner": node.owner or DEFAULT_USER,
        "group": node.group or DEFAULT_GROUP,
        "size": size,
    }


def sort_entries(children: dict[str, FileNode | DirectoryNode], names: list[str]) -> list[str]:
    """Directories first, then names in a case-insensitive collation."""
    return sorted(
        names,
        key=lambda name: (not is_directory_node(children[name]), name.casefold(), name),
    )


def parse_int(text: str) -> int | None:
    """Reads the leading integer of a string, ignoring trailing garbage."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_flags(arg: str) -> set[str]:
    """Splits a combined short-flag argument such as ``-la`` into its letters."""
    if not arg.startswith("-") or arg == "-":
        return set()
    return set(arg[1:])
