""" Implement the core of the shell. """
import logging
import signal
import sys

from constants import (CONTROL_KEYWORDS, KW_ELSE, KW_EXIT, KW_IF, KW_THEN,
                       SHELL_NAME, STATEMENT_SEP, STATUS_FAILURE,
                       STATUS_SYNTAX_ERROR)
from control_flow import ControlFlowContext, IfNode
from exceptions import ResourceError, ShellExit, ShellSyntaxError
from lexer import split_fields, split_words
from parser import is_pipeline
from runner import run_line
from shell_state import ShellState

logger = logging.getLogger(__name__)

# Keywords that may carry a command on the same field: "then echo A"
LEADING_KEYWORDS = {KW_IF, KW_THEN, KW_ELSE}


class InterruptFlag:
    """
    Handler for SIGINT and SIGQUIT. A pending read is abandoned so the
    prompt can be shown again; otherwise the interrupt is only recorded
    and the read loop picks it up. The shell itself never exits on it.
    """
    def __init__(self):
        self.pending = False
        self.reading = False

    def __call__(self, signum, frame):
        self.pending = True
        if self.reading:
            raise KeyboardInterrupt

    def install(self):
        for signum in (signal.SIGINT, signal.SIGQUIT):
            signal.signal(signum, self)

    def consume(self) -> bool:
        pending = self.pending
        self.pending = False
        return pending


def read_command(prompt="$ "):
    """ Read one line from the operator. """
    return input(prompt)


def split_keyword(field: str) -> tuple[str|None, str]:
    """
    Separate a leading control keyword from the rest of a field.
    Returns (keyword or None, remaining command text).
    """
    words = split_words(field)
    if not words or words[0] not in CONTROL_KEYWORDS:
        return None, field
    if len(words) == 1:
        return words[0], ""
    if words[0] in LEADING_KEYWORDS:
        return words[0], " ".join(words[1:])
    return None, field


class Shell:
    def __init__(self, state=None, read_func=None, interrupts=None):
        self.state = state if state is not None else ShellState()
        self.context = ControlFlowContext()
        self.read_func = read_func or read_command
        self.interrupts = interrupts or InterruptFlag()

    def run_or_collect(self, text: str):
        if self.context.collecting:
            self.context.add_line(text)
        else:
            self.state.set_status(run_line(text, self.state))

    def handle_field(self, field: str):
        if not field:
            return
        if split_words(field) == [KW_EXIT]:
            raise ShellExit(0)

        keyword, rest = split_keyword(field)
        if keyword is not None:
            stmt = self.context.handle_keyword(keyword)
            if stmt is not None:
                status = IfNode(stmt, run_line).execute(self.state)
                self.state.set_status(status)
        if rest:
            self.run_or_collect(rest)

    def handle_line(self, line: str):
        """ Classify one input line and run or collect it. """
        if not line.strip():
            return

        try:
            # '|' takes precedence over ';' splitting
            if is_pipeline(line):
                self.run_or_collect(line.strip())
                return
            for field in split_fields(line, STATEMENT_SEP):
                self.handle_field(field.strip())
        except ShellSyntaxError as e:
            # statement aborted, the rest of the line is dropped
            print(f"{SHELL_NAME}: {e}", file=sys.stderr)
            self.state.set_status(STATUS_SYNTAX_ERROR)

    def read_line(self, prompt: str) -> str:
        """
        Read one line with interrupts able to abandon the read. An
        interrupt that lands after the line has arrived keeps the line.
        """
        line = None
        self.interrupts.reading = True
        try:
            line = self.read_func(prompt)
            self.interrupts.reading = False
        except KeyboardInterrupt:
            self.interrupts.reading = False
            if line is None:
                raise
            logger.debug("interrupt after read; keeping %r", line)
        return line

    def run(self) -> int:
        while True:
            if self.interrupts.consume():
                # interrupted while children were running
                print()

            prompt = self.state.prompt(collecting=self.context.collecting)
            try:
                line = self.read_line(prompt)
            except EOFError:
                print("exit")
                return 0
            except KeyboardInterrupt:
                self.interrupts.pending = False
                print()
                continue
            except OSError as e:
                print(f"{SHELL_NAME}: cannot read input: {e}", file=sys.stderr)
                return STATUS_FAILURE

            try:
                self.handle_line(line)
            except ShellExit as e:
                print("exit")
                return e.status
            except ResourceError as e:
                logger.debug("fatal resource error", exc_info=True)
                print(f"{SHELL_NAME}: {e}", file=sys.stderr)
                self.context.reset()
                return STATUS_FAILURE
