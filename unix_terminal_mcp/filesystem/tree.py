"""In-memory filesystem tree addressed by absolute paths."""

import logging

from unix_terminal_mcp.models.nodes import DirectoryNode, FileNode

from .paths import base_name, get_parent_path
from .seed import SEED_IMAGE

logger = logging.getLogger(__name__)

AnyNode = FileNode | DirectoryNode


class FileSystemTree:
    """
    Owns every node of the virtual filesystem.

    All paths passed in are expected to be absolute and already normalized
    (see ``filesystem.paths.resolve_path``). Nodes are immutable; the store
    changes the tree by replacing entries in a parent's ``children`` mapping,
    and it is the only place that does so.
    """

    def __init__(self, image: dict | None = None) -> None:
        self._root: DirectoryNode = self._build_root(SEED_IMAGE if image is None else image)

    @staticmethod
    def _build_root(image: dict) -> DirectoryNode:
        # Validation always produces fresh objects, so the seed is never shared
        return DirectoryNode.model_validate(image)

    # --- Queries ---

    def get_node(self, path: str) -> AnyNode | None:
        current: AnyNode = self._root
        for part in (p for p in path.split("/") if p):
            if not isinstance(current, DirectoryNode):
                return None
            child = current.children.get(part)
            if child is None:
                return None
            current = child
        return current

    def get_directory_children(self, path: str) -> dict[str, AnyNode] | None:
        node = self.get_node(path)
        if not isinstance(node, DirectoryNode):
            return None
        return node.children

    def exists(self, path: str) -> bool:
        return self.get_node(path) is not None

    def is_directory(self, path: str) -> bool:
        return isinstance(self.get_node(path), DirectoryNode)

    @staticmethod
    def get_parent_path(path: str) -> str:
        return get_parent_path(path)

    # --- Mutations ---

    def add_node(self, path: str, node: AnyNode) -> bool:
        """
        Inserts (or overwrites) the entry named by the last path segment.

        Fails without mutating when the parent is missing or is a file.
        """
        parent = self.get_node(get_parent_path(path))
        name = base_name(path)
        if not isinstance(parent, DirectoryNode) or not name:
            logger.debug("add_node rejected for %s: no parent directory", path)
            return False
        parent.children[name] = node
        logger.debug("Added %s node at %s", node.type, path)
        return True

    def remove_node(self, path: str) -> bool:
        """Deletes an entry; a directory takes its whole subtree with it."""
        parent = self.get_node(get_parent_path(path))
        name = base_name(path)
        if not isinstance(parent, DirectoryNode) or name not in parent.children:
            logger.debug("remove_node rejected for %s: no such entry", path)
            return False
        del parent.children[name]
        logger.debug("Removed %s", path)
        return True

    def set_permissions(self, path: str, permissions: str) -> bool:
        return self._update(path, permissions=permissions)

    def set_owner(self, path: str, owner: str, group: str | None = None) -> bool:
        """Changes the owner, and the group only when one is given."""
        if group is None:
            return self._update(path, owner=owner)
        return self._update(path, owner=owner, group=group)

    def _update(self, path: str, **fields) -> bool:
        node = self.get_node(path)
        if node is None:
            return False
        updated = node.model_copy(update=fields)
        if path == "/" or not base_name(path):
            self._root = updated
        else:
            self.get_node(get_parent_path(path)).children[base_name(path)] = updated
        logger.debug("Updated %s on %s", ", ".join(fields), path)
        return True

    # --- Snapshots ---

    def reset(self) -> None:
        """Replaces the whole tree with a fresh copy of the seed layout."""
        self._root = self._build_root(SEED_IMAGE)
        logger.info("Filesystem reset to the seed layout.")

    def load_image(self, image: dict) -> None:
        """
        Hydrates the tree from a serialized image.

        Raises:
            pydantic.ValidationError: If the image is not a valid directory tree.
        """
        self._root = self._build_root(image)
        logger.info("Filesystem hydrated from snapshot.")

    def to_image(self) -> dict:
        """Flattens the tree into plain, JSON-serializable dictionaries."""
        return self._root.model_dump(exclude_none=True)
