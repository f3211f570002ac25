"""
Incremental execution for interactive use.

Input text is buffered until its separator arrives, so one statement may
span several lines. Complete statements accumulate across calls to feed()
and execution resumes from the saved index, so a `while` entered on one
line simply waits until its `end` arrives on a later one.
"""
import logging
from typing import List, Optional

from ast_nodes import Stmt
from config import InterpreterConfig
from interpreter import ExecutionState, Interpreter
from lexer import split_complete
from parser import parse_program

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Session:
    def __init__(self, config: Optional[InterpreterConfig] = None, tracer=None):
        self.interpreter = Interpreter(ExecutionState(), config, tracer)
        self.program: List[Stmt] = []
        self._pending = ""

    @property
    def state(self) -> ExecutionState:
        return self.interpreter.state

    @property
    def pending(self) -> str:
        """Text received after the last separator."""
        return self._pending

    def take_statements(self, text: str) -> List[str]:
        """Buffer `text` and return the non-blank statements it completes."""
        statements, self._pending = split_complete(self._pending + text)
        return [s for s in statements if s.strip()]

    def execute(self, statements: List[str]) -> ExecutionState:
        """Append already split statements and run as far as possible."""
        new_stmts = parse_program(statements, first_line=len(self.program))
        self.program.extend(new_stmts)
        logger.debug("fed %d statement(s), program now %d long", len(new_stmts), len(self.program))
        return self.interpreter.interpret(self.program)

    def feed(self, text: str) -> ExecutionState:
        return self.execute(self.take_statements(text))

    def discard_failed(self):
        """Drop the statement at the saved index and everything after it.

        After a runtime error the index still points at the failing
        statement; discarding it lets the session carry on.
        """
        del self.program[self.state.index:]

    def reset(self):
        self._pending = ""
        self.program.clear()
        self.interpreter.reset()

    def format_results(self, indent: str = "") -> List[str]:
        return self.interpreter.format_results(indent)
