""" Commands and pipelines to be executed. """
import logging
import os

logger = logging.getLogger(__name__)


def close_fd(fd):
    """ Close a descriptor we own, ignoring one that is already gone. """
    if fd is None:
        return
    try:
        os.close(fd)
    except OSError as e:
        logger.debug("close(%d) failed: %s", fd, e)


class Command:
    """ A parsed command with optional pipe endpoints. """
    def __init__(self, name, args, stdin=None, stdout=None):
        self.name = name
        self.args = args
        self.stdin = stdin        # read end of the previous channel, or None
        self.stdout = stdout      # write end of the next channel, or None

    @property
    def argv(self) -> list[str]:
        return [self.name] + self.args

    def close(self):
        """ Release this process's copies of the endpoints. """
        close_fd(self.stdin)
        close_fd(self.stdout)
        self.stdin = None
        self.stdout = None

    def __repr__(self):
        return f"Command({self.argv!r}, stdin={self.stdin}, stdout={self.stdout})"


class Pipeline:
    """
    Commands joined by channels: channel k carries stage k's output
    to stage k+1's input.
    """
    def __init__(self, commands: list[Command], channels: list[tuple[int, int]]):
        self.commands = commands
        self.channels = channels

    def __len__(self):
        return len(self.commands)

    def close(self):
        """ Release every endpoint the parent still holds. Safe to repeat. """
        for cmd in self.commands:
            cmd.close()
