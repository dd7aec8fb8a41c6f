""" Builtins that must run inside the shell process. """
import os
import sys

from constants import SHELL_NAME, STATUS_FAILURE, STATUS_OK, STATUS_SYNTAX_ERROR
from exceptions import ShellExit

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def report(name, message):
    print(f"{SHELL_NAME}: {name}: {message}", file=sys.stderr)


@builtin("cd")
def change_directory(args, state) -> int:
    """ cd [DIR]; without DIR goes to $HOME, or / when HOME is unset. """
    if len(args) > 1:
        report("cd", "too many arguments")
        return STATUS_FAILURE

    target = args[0] if args else os.environ.get("HOME") or "/"
    try:
        os.chdir(target)
    except OSError as e:
        report("cd", f"{target}: {e.strerror or e}")
        return STATUS_FAILURE
    return STATUS_OK


@builtin("exit")
def exit_session(args, state):
    # status is reduced to 0-255 like a process exit code
    if not args:
        raise ShellExit(STATUS_OK)
    try:
        status = int(args[0]) & 0xFF
    except ValueError:
        report("exit", f"{args[0]}: numeric argument required")
        status = STATUS_SYNTAX_ERROR
    raise ShellExit(status)
