""" Launch commands and pipelines as child processes. """
import errno
import logging
import subprocess
import sys

from command import Command, Pipeline
from constants import (SHELL_NAME, STATUS_NOT_EXECUTABLE, STATUS_NOT_FOUND,
                       STATUS_SYNTAX_ERROR)
from exceptions import ResourceError, ShellSyntaxError
from parser import build_pipeline, is_pipeline, parse_command_list
from shell_builtins import BUILTINS
from shell_state import ShellState

logger = logging.getLogger(__name__)

# The process itself could not be created. Any other errno means the
# named program could not be executed.
RESOURCE_ERRNOS = {errno.EAGAIN, errno.ENOMEM, errno.EMFILE, errno.ENFILE}

NOT_FOUND_ERRNOS = {errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG}


class LaunchFailure:
    """ Stands in for a stage whose program could not be executed. """
    def __init__(self, name, returncode):
        self.name = name
        self.returncode = returncode

    def wait(self):
        return self.returncode


def launch_failure(cmd: Command, reason: str, status: int) -> LaunchFailure:
    print(f"{SHELL_NAME}: {cmd.name}: {reason}", file=sys.stderr)
    logger.debug("cannot execute %r: %s", cmd.name, reason)
    return LaunchFailure(cmd.name, status)


def launch(cmd: Command):
    """
    Start cmd with its endpoints as stdin/stdout. subprocess duplicates
    them onto fd 0/1 in the child and closes every other descriptor there.
    The parent's copies are left for the caller to close.

    A program that cannot be executed is reported and comes back as a
    LaunchFailure. Only a failure to create the process raises.
    """
    sys.stdout.flush()
    try:
        proc = subprocess.Popen(cmd.argv, stdin=cmd.stdin, stdout=cmd.stdout)
    except ValueError as e:
        # e.g. an embedded null byte in the argument vector
        return launch_failure(cmd, str(e), STATUS_NOT_EXECUTABLE)
    except PermissionError:
        return launch_failure(cmd, "permission denied", STATUS_NOT_EXECUTABLE)
    except OSError as e:
        if e.errno in RESOURCE_ERRNOS:
            raise ResourceError(f"{cmd.name}: cannot create process: {e.strerror}") from e
        if e.errno in NOT_FOUND_ERRNOS:
            return launch_failure(cmd, "command not found...", STATUS_NOT_FOUND)
        return launch_failure(cmd, e.strerror or str(e), STATUS_NOT_EXECUTABLE)

    logger.debug("spawned %d: %r", proc.pid, cmd)
    return proc


def wait_all(procs) -> list[int]:
    """ Reap every launched stage, in launch order. """
    statuses = []
    for proc in procs:
        status = proc.wait()
        if isinstance(proc, LaunchFailure):
            logger.debug("stage %r was not launched, status %d", proc.name, status)
        else:
            logger.debug("stage pid=%d exited with %d", proc.pid, status)
        statuses.append(status)
    return statuses


def launch_pipeline(pipeline: Pipeline) -> list:
    """
    Start every stage in order. After each spawn the parent closes its
    copies of that stage's endpoints so end-of-stream reaches the next
    stage. The caller waits for the returned processes.
    """
    procs = []
    try:
        for cmd in pipeline.commands:
            try:
                procs.append(launch(cmd))
            finally:
                cmd.close()
    except ResourceError:
        pipeline.close()
        logger.debug("launch failed after %d stage(s); reaping them", len(procs))
        wait_all(procs)
        raise
    return procs


def execute_pipeline(pipeline: Pipeline) -> int:
    procs = launch_pipeline(pipeline)
    statuses = wait_all(procs)
    return statuses[-1]


def execute_command(cmd: Command, shell_state: ShellState) -> int:
    # Builtins run in the interpreter itself
    if cmd.name in BUILTINS:
        return BUILTINS[cmd.name](cmd.args, shell_state) or 0

    proc = launch(cmd)
    return proc.wait()


def run_line(line: str, shell_state: ShellState) -> int:
    """
    Run one raw line, a pipeline or ';'-separated commands, and return
    the status of the last thing run.
    """
    if is_pipeline(line):
        try:
            pipeline = build_pipeline(line)
        except ShellSyntaxError as e:
            print(f"{SHELL_NAME}: {e}", file=sys.stderr)
            return STATUS_SYNTAX_ERROR
        return execute_pipeline(pipeline)

    status = 0
    for cmd in parse_command_list(line):
        status = execute_command(cmd, shell_state)
    return status
