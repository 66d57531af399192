"""
Unit tests for interpreter.py
"""

import pytest

from unix_terminal_mcp.commands.base import CommandContext
from unix_terminal_mcp.commands.utils.formatting_utils import Style
from unix_terminal_mcp.interpreter import Completion, parse_command


class TestParseCommand:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("ls -la", ["ls", "-la"]),
            ("ls    -l   /etc", ["ls", "-l", "/etc"]),
            ('echo "Hello World"', ["echo", "Hello World"]),
            ("echo 'it is'", ["echo", "it is"]),
            ('echo "it\'s"', ["echo", "it's"]),
            ('grep "a b', ["grep", "a b"]),
            ('echo ""', ["echo"]),
            ('find . -name "*.txt"', ["find", ".", "-name", "*.txt"]),
            ("", []),
            ("   ", []),
        ],
    )
    def test_tokenizes(self, line, expected):
        assert parse_command(line) == expected


class TestExecuteCommand:
    """Dispatching through the interpreter"""

    def test_empty_line(self, interpreter):
        result = interpreter.execute_command("   ", "/home/user")
        assert result.lines == []
        assert result.new_path is None

    def test_unknown_command(self, interpreter):
        result = interpreter.execute_command("foo --bar", "/home/user")
        assert [line.role for line in result.lines] == [Style.ERROR, Style.INFO]
        assert result.lines[0].text == "foo: command not found"
        assert result.output == (
            "\x1b[31mfoo: command not found\x1b[0m\r\nType \x1b[32mhelp\x1b[0m to see available commands."
        )

    def test_command_name_is_case_insensitive(self, interpreter):
        assert interpreter.execute_command("PWD", "/etc").output == "/etc"

    def test_arguments_keep_case(self, interpreter):
        assert interpreter.execute_command("ECHO Hello", "/").output == "Hello"

    def test_context_is_optional(self, interpreter):
        assert interpreter.execute_command("history", "/").lines == []

    def test_all_commands_registered(self, interpreter):
        assert set(interpreter.command_names) == {
            "pwd", "ls", "cd", "tree", "cat", "head", "tail", "less", "touch", "mkdir", "rm", "cp", "mv",
            "grep", "find", "wc", "echo", "whoami", "ps", "kill", "df", "du", "uname", "uptime",
            "chmod", "chown", "date", "history", "clear", "help", "lesson", "reset",
        }


class TestScenarios:
    """Short sessions driven through the interpreter"""

    def test_make_and_enter_directory(self, interpreter):
        cwd = "/home/user"
        interpreter.execute_command("mkdir projects", cwd)
        result = interpreter.execute_command("cd projects", cwd)
        assert result.new_path == "/home/user/projects"
        assert interpreter.execute_command("ls", result.new_path).output == ""

    def test_missing_directory(self, interpreter):
        result = interpreter.execute_command("cd /nope", "/home/user")
        assert "No such file or directory" in result.output
        assert result.new_path is None

    def test_protected_path(self, interpreter):
        result = interpreter.execute_command("rm /etc", "/home/user")
        assert "Permission denied" in result.output

    def test_write_then_read_elsewhere(self, interpreter, tree):
        interpreter.execute_command("cp documents/notes.txt /tmp/copy.txt", "/home/user")
        interpreter.execute_command("mv copy.txt ../home/user/moved.txt", "/tmp")
        result = interpreter.execute_command("grep sample moved.txt", "/home/user")
        assert result.lines[0].text == "This is a sample text file."
        assert not tree.exists("/tmp/copy.txt")

    def test_lesson_callback(self, interpreter):
        changes = []
        context = CommandContext(current_lesson=0, on_lesson_change=changes.append)
        interpreter.execute_command("lesson next", "/home/user", context)
        assert changes == [1]


class TestComplete:
    """Tab completion"""

    def test_unique_command(self, interpreter):
        assert interpreter.complete("pw", "/home/user") == Completion(buffer="pwd ", candidates=["pwd"])

    def test_ambiguous_command_lists_candidates(self, interpreter):
        completion = interpreter.complete("l", "/home/user")
        assert completion.buffer is None
        assert completion.candidates == ["ls", "less", "lesson"]

    def test_command_prefix_is_case_insensitive(self, interpreter):
        assert interpreter.complete("WHO", "/").buffer == "whoami "

    def test_no_command_match(self, interpreter):
        assert interpreter.complete("zz", "/") == Completion()

    def test_unique_directory_gets_slash(self, interpreter):
        assert interpreter.complete("cat doc", "/home/user").buffer == "cat documents/"

    def test_unique_file_gets_no_slash(self, interpreter):
        assert interpreter.complete("cat documents/no", "/home/user").buffer == "cat documents/notes.txt"

    def test_common_prefix(self, interpreter):
        completion = interpreter.complete("ls d", "/home/user")
        assert completion.buffer == "ls do"
        assert completion.candidates == ["documents", "downloads"]

    def test_ambiguous_without_progress(self, interpreter):
        completion = interpreter.complete("ls do", "/home/user")
        assert completion.buffer is None
        assert completion.candidates == ["documents", "downloads"]

    def test_absolute_path(self, interpreter):
        assert interpreter.complete("cd /e", "/home/user").buffer == "cd /etc/"
        assert interpreter.complete("cat /etc/pa", "/").buffer == "cat /etc/passwd"

    def test_hidden_entries_are_skipped(self, interpreter):
        assert interpreter.complete("cat .b", "/home/user") == Completion()

    def test_missing_directory(self, interpreter):
        assert interpreter.complete("ls /nope/x", "/") == Completion()

    def test_empty_word_lists_directory(self, interpreter):
        completion = interpreter.complete("ls ", "/var")
        assert completion.buffer == "ls log/"
