"""
Path resolution for the virtual filesystem.

Every path handed to the tree store is absolute and normalized: it starts
with ``/``, carries no ``.`` segments and no trailing slash (except the root
itself). Resolution never fails; whether the path exists is the caller's
concern.
"""

from unix_terminal_mcp.commands.utils.constants import HOME_PATH


def normalize_path(path: str) -> str:
    """Collapse ``.``/``..`` segments and duplicate slashes into an absolute path."""
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            # ".." at the root stays at the root
            if parts:
                parts.pop()
        else:
            parts.append(segment)
    return "/" + "/".join(parts)


def resolve_path(current_dir: str, token: str) -> str:
    """
    Resolves a user-provided path token against the current directory.

    Args:
        current_dir: The absolute, normalized current directory.
        token: The raw path as typed (absolute, relative, or ``~``-prefixed).

    Returns:
        The absolute, normalized path the token refers to.
    """
    if token.startswith("/"):
        return normalize_path(token)

    if token == "~" or token.startswith("~/"):
        return normalize_path(HOME_PATH + token[1:])

    return normalize_path(current_dir + "/" + token)


def get_parent_path(path: str) -> str:
    """Strips the last segment; the parent of ``/`` is ``/``."""
    parts = [p for p in path.split("/") if p]
    return "/" + "/".join(parts[:-1])


def base_name(path: str) -> str:
    parts = [p for p in path.split("/") if p]
    return parts[-1] if parts else ""


def join_path(directory: str, name: str) -> str:
    """Appends a child name to a directory path without doubling the root slash."""
    if directory == "/":
        return f"/{name}"
    return f"{directory}/{name}"
