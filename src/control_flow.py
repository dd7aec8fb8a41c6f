""" Collect if/then/else/fi statements line by line and execute them. """
import dataclasses
import logging
from dataclasses import dataclass

from constants import KW_ELSE, KW_FI, KW_IF, KW_THEN
from exceptions import ShellSyntaxError
from shell_state import ShellState

logger = logging.getLogger(__name__)

Block = tuple[str, ...]


@dataclass(frozen=True)
class Default:
    """ Not inside a statement; lines run immediately. """
    keyword = None


@dataclass(frozen=True)
class CollectingIf:
    if_block: Block = ()
    keyword = KW_IF


@dataclass(frozen=True)
class CollectingThen:
    if_block: Block
    then_block: Block = ()
    keyword = KW_THEN


@dataclass(frozen=True)
class CollectingElse:
    if_block: Block
    then_block: Block
    else_block: Block = ()
    keyword = KW_ELSE


State = Default | CollectingIf | CollectingThen | CollectingElse

DEFAULT = Default()


@dataclass(frozen=True)
class IfStatement:
    """ A closed statement, ready to run. """
    if_block: Block
    then_block: Block
    else_block: Block = ()


class ControlFlowContext:
    """
    The statement being composed across input lines. Only one is live at
    a time; there is no nesting.
    """
    def __init__(self):
        self.state: State = DEFAULT

    @property
    def collecting(self) -> bool:
        return not isinstance(self.state, Default)

    def reset(self):
        self.state = DEFAULT

    def add_line(self, line: str):
        """ Append a raw command line to the block being collected. """
        state = self.state
        if isinstance(state, CollectingIf):
            self.state = dataclasses.replace(state, if_block=state.if_block + (line,))
        elif isinstance(state, CollectingThen):
            self.state = dataclasses.replace(state, then_block=state.then_block + (line,))
        elif isinstance(state, CollectingElse):
            self.state = dataclasses.replace(state, else_block=state.else_block + (line,))
        else:
            raise ValueError("not collecting a statement")

    def handle_keyword(self, keyword: str) -> IfStatement|None:
        """
        Apply a control keyword. Returns the closed statement on 'fi'.
        An invalid keyword resets the context and raises ShellSyntaxError.
        """
        state = self.state
        new_state = None
        stmt = None

        if keyword == KW_IF:
            if isinstance(state, Default):
                new_state = CollectingIf()
        elif keyword == KW_THEN:
            if isinstance(state, CollectingIf) and state.if_block:
                new_state = CollectingThen(state.if_block)
        elif keyword == KW_ELSE:
            if isinstance(state, CollectingThen) and state.then_block:
                new_state = CollectingElse(state.if_block, state.then_block)
        elif keyword == KW_FI:
            if isinstance(state, CollectingThen):
                stmt = IfStatement(state.if_block, state.then_block)
                new_state = DEFAULT
            elif isinstance(state, CollectingElse):
                stmt = IfStatement(state.if_block, state.then_block, state.else_block)
                new_state = DEFAULT

        if new_state is None:
            self.reset()
            if state.keyword is None:
                raise ShellSyntaxError(f"invalid command `{keyword}` at top level")
            raise ShellSyntaxError(f"invalid command `{keyword}` after `{state.keyword}`")

        logger.debug("%s: %s -> %s", keyword, type(state).__name__, type(new_state).__name__)
        self.state = new_state
        return stmt


class IfNode:
    """ Execute a closed if statement. """
    def __init__(self, stmt: IfStatement, run_line):
        self.stmt = stmt
        self.run_line = run_line  # e.g., runner.run_line

    def _run_block(self, block: Block, state: ShellState) -> int:
        status = 0
        for line in block:
            status = self.run_line(line, state) or 0
        return status

    def execute(self, state: ShellState) -> int:
        # Only the last if-block command decides the branch
        status = self._run_block(self.stmt.if_block, state)

        if status == 0:  # shell convention: 0 = true
            logger.debug("condition succeeded; running then-block")
            return self._run_block(self.stmt.then_block, state)

        logger.debug("condition failed with %d; running else-block", status)
        return self._run_block(self.stmt.else_block, state)
