""" Current state of the shell session. """
import getpass
import logging
import os
import socket

from constants import CONTINUATION_PROMPT

logger = logging.getLogger(__name__)


def current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "user"


def short_host_name() -> str:
    return socket.gethostname().split(".", 1)[0]


def dir_name(path: str) -> str:
    # basename of "/" is empty
    return os.path.basename(path.rstrip("/")) or "/"


def current_dir_name() -> str:
    return dir_name(os.getcwd())


class ShellState:
    """
    Session environment used by the front-end and the builtins.
    The interpreter core never reads it.
    """
    def __init__(self, user=None, host=None):
        self.user = user if user is not None else current_user()
        self.host = host if host is not None else short_host_name()
        self.last_status = 0
        self.last_dir_name = dir_name(os.environ.get("PWD", "/"))

    def set_status(self, status: int):
        self.last_status = int(status) if status is not None else 0

    def working_dir_name(self) -> str:
        """ Basename of the working directory, or the last one seen if it is gone. """
        try:
            self.last_dir_name = current_dir_name()
        except OSError as e:
            logger.debug("getcwd failed, keeping %r: %s", self.last_dir_name, e)
        return self.last_dir_name

    def prompt(self, collecting=False) -> str:
        if collecting:
            return CONTINUATION_PROMPT
        return f"[{self.user}@{self.host} {self.working_dir_name()}]$ "
