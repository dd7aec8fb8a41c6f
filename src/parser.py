""" Parse shell commands and build pipelines. """
import logging
import os

from command import Command, Pipeline, close_fd
from constants import PIPE_SEP, STATEMENT_SEP
from exceptions import ResourceError, ShellError, ShellSyntaxError
from lexer import split_fields, split_words

logger = logging.getLogger(__name__)


def is_pipeline(line: str) -> bool:
    """ A '|' anywhere makes the line a pipeline, ahead of ';' splitting. """
    return PIPE_SEP in line


def parse_simple_command(words: list[str]) -> Command|None:
    """ Parse a simple shell command. """
    if not words:
        return None
    return Command(words[0], words[1:])


def parse_command_list(line: str) -> list[Command]:
    cmds = []
    for field in split_fields(line, STATEMENT_SEP):
        cmd = parse_simple_command(split_words(field))
        if cmd is not None:
            cmds.append(cmd)
    return cmds


def build_pipeline(line: str) -> Pipeline:
    """
    Split line into stages and allocate a channel between each adjacent
    pair. On failure every channel built so far is closed before the
    error propagates; nothing is launched from here.
    """
    segments = split_fields(line, PIPE_SEP)
    if not segments:
        raise ShellSyntaxError(f"syntax error near unexpected token `{PIPE_SEP}'")

    commands = []
    channels = []
    pending_read = None   # read end waiting for the next stage

    try:
        for idx, segment in enumerate(segments):
            cmd = parse_simple_command(split_words(segment))
            if cmd is None:
                raise ShellSyntaxError(f"syntax error near unexpected token `{PIPE_SEP}'")

            cmd.stdin = pending_read
            pending_read = None
            commands.append(cmd)

            if idx < len(segments) - 1:
                try:
                    read_fd, write_fd = os.pipe()
                except OSError as e:
                    raise ResourceError(f"pipe: {e.strerror}") from e
                channels.append((read_fd, write_fd))
                cmd.stdout = write_fd
                pending_read = read_fd
    except ShellError:
        logger.debug("releasing %d channel(s) after failed build", len(channels))
        close_fd(pending_read)
        for cmd in commands:
            cmd.close()
        raise

    logger.debug("built pipeline of %d stage(s), %d channel(s)", len(commands), len(channels))
    return Pipeline(commands, channels)
