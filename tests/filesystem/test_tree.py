"""
Unit tests for filesystem/tree.py
"""

import pytest
from pydantic import ValidationError

from unix_terminal_mcp.filesystem.tree import FileSystemTree
from unix_terminal_mcp.models.nodes import DirectoryNode, FileNode


class TestFileSystemTree:
    """Tests for FileSystemTree"""

    @pytest.fixture
    def tree(self):
        """Creates a tree with the seed layout"""
        return FileSystemTree()

    def test_seed_layout(self, tree):
        """The seed contains home, /etc, /var/log and an empty /tmp"""
        assert isinstance(tree.get_node("/"), DirectoryNode)
        assert tree.is_directory("/home/user/documents")
        assert tree.is_directory("/var/log")
        assert tree.get_directory_children("/tmp") == {}
        notes = tree.get_node("/home/user/documents/notes.txt")
        assert isinstance(notes, FileNode)
        assert notes.content.startswith("Welcome to Unix for the Rest of Us!")

    def test_get_node_missing_or_through_file(self, tree):
        """Missing segments and segments below a file are absent"""
        assert tree.get_node("/nope") is None
        assert tree.get_node("/etc/hosts/inner") is None
        assert not tree.exists("/etc/hosts/inner")

    def test_get_directory_children_of_file_is_none(self, tree):
        assert tree.get_directory_children("/etc/hosts") is None
        assert not tree.is_directory("/etc/hosts")
        assert not tree.is_directory("/missing")

    def test_add_node(self, tree):
        """A node is added under an existing directory and is visible from the parent"""
        assert tree.add_node("/tmp/new.txt", FileNode(content="hi"))
        assert tree.exists("/tmp/new.txt")
        assert "new.txt" in tree.get_directory_children(tree.get_parent_path("/tmp/new.txt"))

    def test_add_node_fails_without_parent_directory(self, tree):
        """No mutation happens when the parent is missing or is a file"""
        before = tree.to_image()
        assert not tree.add_node("/nope/new.txt", FileNode())
        assert not tree.add_node("/etc/hosts/new.txt", FileNode())
        assert tree.to_image() == before

    def test_add_node_overwrites(self, tree):
        assert tree.add_node("/etc/hosts", FileNode(content="replaced"))
        assert tree.get_node("/etc/hosts").content == "replaced"

    def test_remove_node_drops_subtree(self, tree):
        """Removing a directory removes every descendant"""
        assert tree.remove_node("/home/user/documents")
        assert not tree.exists("/home/user/documents")
        assert not tree.exists("/home/user/documents/notes.txt")

    def test_remove_missing_node_fails(self, tree):
        assert not tree.remove_node("/home/user/missing")
        assert not tree.remove_node("/nope/missing")

    def test_nodes_are_read_only(self, tree):
        """Nodes cannot be changed in place; the store is the only writer"""
        node = tree.get_node("/etc/hosts")
        with pytest.raises(ValidationError):
            node.permissions = "-rwxrwxrwx"

    def test_set_permissions(self, tree):
        old = tree.get_node("/etc/hosts")
        assert tree.set_permissions("/etc/hosts", "-rwx------")
        assert tree.get_node("/etc/hosts").permissions == "-rwx------"
        assert tree.get_node("/etc/hosts").content == old.content
        assert old.permissions is None

    def test_set_permissions_on_root(self, tree):
        assert tree.set_permissions("/", "drwx------")
        assert tree.get_node("/").permissions == "drwx------"
        assert tree.exists("/etc/hosts")

    def test_set_owner_keeps_group_when_omitted(self, tree):
        tree.set_owner("/etc/hosts", "root", "wheel")
        tree.set_owner("/etc/hosts", "admin")
        node = tree.get_node("/etc/hosts")
        assert node.owner == "admin"
        assert node.group == "wheel"

    def test_set_on_missing_path_fails(self, tree):
        assert not tree.set_permissions("/missing", "-rw-------")
        assert not tree.set_owner("/missing", "root")

    def test_reset_restores_seed(self, tree):
        seed = tree.to_image()
        tree.remove_node("/etc")
        tree.add_node("/tmp/a", DirectoryNode())
        tree.reset()
        assert tree.to_image() == seed

    def test_trees_do_not_share_nodes(self, tree):
        """Each tree gets its own copy of the seed"""
        other = FileSystemTree()
        tree.remove_node("/tmp")
        assert other.exists("/tmp")

    def test_image_round_trip(self, tree):
        """serialize -> reset -> hydrate gives back the same tree"""
        tree.add_node("/tmp/projects", DirectoryNode())
        tree.add_node("/tmp/projects/a.txt", FileNode(content="a\nb"))
        tree.set_owner("/tmp/projects/a.txt", "bob", "staff")
        image = tree.to_image()

        tree.reset()
        assert not tree.exists("/tmp/projects")

        tree.load_image(image)
        assert tree.to_image() == image
        assert tree.get_node("/tmp/projects/a.txt").owner == "bob"

    def test_image_is_plain_data(self, tree):
        image = tree.to_image()
        assert image["type"] == "directory"
        assert image["children"]["etc"]["children"]["hosts"]["type"] == "file"
        assert "permissions" not in image["children"]["etc"]

    def test_load_invalid_image_raises(self, tree):
        with pytest.raises(ValidationError):
            tree.load_image({"type": "directory", "children": {"x": {"type": "socket"}}})
