import unittest
from unittest.mock import patch

import shell_state
from shell_state import ShellState


class TestShellState(unittest.TestCase):
    def test_explicit_identity(self):
        state = ShellState(user="alice", host="box")
        self.assertEqual("alice", state.user)
        self.assertEqual("box", state.host)
        self.assertEqual(0, state.last_status)

    @patch.object(shell_state.socket, "gethostname", return_value="build01.example.com")
    @patch.object(shell_state.getpass, "getuser", return_value="bob")
    def test_identity_from_system(self, mock_user, mock_host):
        state = ShellState()
        self.assertEqual("bob", state.user)
        self.assertEqual("build01", state.host)

    @patch.object(shell_state.getpass, "getuser", side_effect=OSError)
    def test_unknown_user_falls_back(self, mock_user):
        self.assertEqual("user", shell_state.current_user())

    # -------------------------
    # status
    # -------------------------
    def test_set_status(self):
        state = ShellState(user="u", host="h")
        state.set_status(127)
        self.assertEqual(127, state.last_status)
        state.set_status(None)
        self.assertEqual(0, state.last_status)

    # -------------------------
    # prompt
    # -------------------------
    @patch.object(shell_state.os, "getcwd", return_value="/home/alice/project")
    def test_prompt_shows_user_host_and_dir_name(self, mock_cwd):
        state = ShellState(user="alice", host="box")
        self.assertEqual("[alice@box project]$ ", state.prompt())

    @patch.object(shell_state.os, "getcwd", return_value="/")
    def test_prompt_at_root(self, mock_cwd):
        state = ShellState(user="alice", host="box")
        self.assertEqual("[alice@box /]$ ", state.prompt())

    def test_prompt_keeps_last_name_when_directory_is_gone(self):
        state = ShellState(user="alice", host="box")
        with patch.object(shell_state.os, "getcwd", return_value="/home/alice/project"):
            state.prompt()
        with patch.object(shell_state.os, "getcwd", side_effect=FileNotFoundError(2, "No such file or directory")):
            self.assertEqual("[alice@box project]$ ", state.prompt())

    @patch.object(shell_state.os, "getcwd", side_effect=FileNotFoundError(2, "No such file or directory"))
    def test_prompt_falls_back_to_pwd(self, mock_cwd):
        with patch.dict(shell_state.os.environ, {"PWD": "/srv/data/"}):
            state = ShellState(user="alice", host="box")
        self.assertEqual("[alice@box data]$ ", state.prompt())

    def test_continuation_prompt(self):
        state = ShellState(user="alice", host="box")
        self.assertEqual("> ", state.prompt(collecting=True))


if __name__ == "__main__":
    unittest.main()
