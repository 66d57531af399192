"""
Unit tests for commands/permissions.py
"""

RED = "\x1b[31m"
RESET = "\x1b[0m"


class TestChmod:
    """Tests for chmod"""

    def test_octal_mode_on_file(self, run, tree):
        assert run("chmod 755 scripts/hello.sh").output == ""
        assert tree.get_node("/home/user/scripts/hello.sh").permissions == "-rwxr-xr-x"

    def test_octal_mode_on_directory(self, run, tree):
        run("chmod 700 documents")
        assert tree.get_node("/home/user/documents").permissions == "drwx------"

    def test_invalid_mode_is_ignored(self, run, tree):
        for mode in ("u+x", "75", "7777", "789"):
            assert run(f"chmod {mode} /etc/hosts").output == ""
        assert tree.get_node("/etc/hosts").permissions is None

    def test_errors(self, run):
        assert run("chmod 755").output == f"{RED}chmod: missing operand{RESET}"
        assert run("chmod 755 nope").output == f"{RED}chmod: cannot access 'nope': No such file or directory{RESET}"


class TestChown:
    """Tests for chown"""

    def test_owner_and_group(self, run, tree):
        run("chown root:wheel /etc/hosts")
        node = tree.get_node("/etc/hosts")
        assert (node.owner, node.group) == ("root", "wheel")

    def test_owner_only_keeps_group(self, run, tree):
        run("chown root:staff /etc/hosts")
        run("chown admin /etc/hosts")
        node = tree.get_node("/etc/hosts")
        assert (node.owner, node.group) == ("admin", "staff")

    def test_empty_group_keeps_group(self, run, tree):
        run("chown root: /etc/passwd")
        node = tree.get_node("/etc/passwd")
        assert (node.owner, node.group) == ("root", None)

    def test_errors(self, run):
        assert run("chown root").output == f"{RED}chown: missing operand{RESET}"
        assert run("chown root nope").output == f"{RED}chown: cannot access 'nope': No such file or directory{RESET}"
