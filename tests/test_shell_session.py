"""
Unit tests for shell_session.py
"""

import pytest

from unix_terminal_mcp.shell_session import ShellSession
from unix_terminal_mcp.storage import JsonFileStorage


class TestShellSession:
    """In-memory sessions"""

    @pytest.fixture
    def session(self):
        return ShellSession()

    def test_starts_at_home(self, session):
        assert session.cwd == "/home/user"
        assert session.state.lesson == 0
        assert len(session.history) == 0

    def test_cd_updates_cwd(self, session):
        session.run("cd documents")
        assert session.cwd == "/home/user/documents"
        assert session.run("pwd").output == "/home/user/documents"

    def test_failed_cd_keeps_cwd(self, session):
        session.run("cd /nope")
        assert session.cwd == "/home/user"

    def test_history_records_non_blank_lines(self, session):
        session.run("ls")
        session.run("   ")
        session.run("nosuchcommand")
        assert session.history.get_all() == ["ls", "nosuchcommand"]
        assert session.run("history").lines[-1].text == "  3  history"

    def test_lesson_changes(self, session):
        session.run("lesson 2")
        session.run("lesson next")
        assert session.state.lesson == 3
        session.run("lesson 9")
        assert session.state.lesson == 3

    def test_complete_uses_cwd(self, session):
        session.run("cd /etc")
        assert session.complete("cat ho").buffer == "cat hosts"

    def test_reset_command(self, session):
        session.run("cd /tmp")
        session.run("rm -r /home/user/scripts")
        result = session.run("reset")
        assert result.new_path == "/home/user"
        assert session.cwd == "/home/user"
        assert session.tree.exists("/home/user/scripts/hello.sh")
        assert len(session.history) == 0

    def test_reset(self, session):
        session.run("lesson 4")
        session.run("cd /etc")
        session.run("touch /tmp/x")
        session.reset()
        assert session.cwd == "/home/user"
        assert session.state.lesson == 0
        assert len(session.history) == 0
        assert not session.tree.exists("/tmp/x")

    def test_snapshot(self, session):
        session.run("mkdir /tmp/projects")
        image = session.snapshot()
        assert image["children"]["tmp"]["children"]["projects"] == {"type": "directory", "children": {}}


class TestPersistentShellSession:
    """Sessions backed by JsonFileStorage"""

    @pytest.fixture
    def storage(self, tmp_path):
        return JsonFileStorage(tmp_path)

    def test_state_survives_restart(self, storage):
        first = ShellSession(storage)
        first.run("mkdir /tmp/keep")
        first.run("cd /tmp/keep")
        first.run("lesson 3")

        second = ShellSession(storage)
        assert second.tree.is_directory("/tmp/keep")
        assert second.cwd == "/tmp/keep"
        assert second.state.lesson == 3
        assert second.history.get_all() == ["mkdir /tmp/keep", "cd /tmp/keep", "lesson 3"]

    def test_stale_cwd_falls_back_home(self, storage):
        storage.save_current_path("/gone")
        assert ShellSession(storage).cwd == "/home/user"

    def test_invalid_image_keeps_seed(self, storage):
        storage.save_file_system({"type": "directory", "children": {"x": {"type": "socket"}}})
        session = ShellSession(storage)
        assert session.tree.exists("/etc/hosts")
        assert not session.tree.exists("/x")

    def test_reset_clears_storage(self, storage):
        session = ShellSession(storage)
        session.run("touch /tmp/x")
        session.reset()
        assert storage.load_command_history() is None
        assert storage.load_file_system() is None
        assert not ShellSession(storage).tree.exists("/tmp/x")
