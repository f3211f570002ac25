import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ast_nodes import *
from config import InterpreterConfig, LoopPolicy
from lexer import split_statements
from loop_stack import LoopFrame, LoopStack
from parser import parse_program
from symbol_table import VariableStore

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class InterpreterError(Exception):
    def __init__(self, message, line=None, text=None):
        super().__init__(message)
        self.line = line      # 0-based statement index, None if not tied to one
        self.text = text


class UnbalancedLoopError(InterpreterError):
    """`end` executed while no loop is open."""
    pass


class StepLimitExceededError(InterpreterError):
    pass


class ExecutionCancelledError(InterpreterError):
    pass


@dataclass
class ExecutionState:
    """Everything a running program can change. One per program run."""
    variables: VariableStore = field(default_factory=VariableStore)
    loops: LoopStack = field(default_factory=LoopStack)
    index: int = 0
    steps: int = 0

    def reset(self):
        self.variables.reset()
        self.loops.clear()
        self.index = 0
        self.steps = 0


class Interpreter:
    def __init__(self, state: Optional[ExecutionState] = None,
                 config: Optional[InterpreterConfig] = None,
                 tracer=None,
                 should_stop: Optional[Callable[[], bool]] = None):
        self.state = state if state is not None else ExecutionState()
        self.config = config if config is not None else InterpreterConfig()
        self.tracer = tracer
        self.should_stop = should_stop
        self._init_dispatch_tables()

    def _init_dispatch_tables(self):
        self._stmt_visitors = {
            ClearStmt: self.visit_ClearStmt,
            IncrStmt: self.visit_IncrStmt,
            DecrStmt: self.visit_DecrStmt,
            WhileStmt: self.visit_WhileStmt,
            EndStmt: self.visit_EndStmt,
            NoOpStmt: self.visit_NoOpStmt,
        }

    @property
    def variables(self) -> VariableStore:
        return self.state.variables

    @property
    def loops(self) -> LoopStack:
        return self.state.loops

    @property
    def current_line(self) -> int:
        """1-based line of the statement being (or last) executed."""
        return self.state.index + 1

    def reset(self):
        self.state.reset()

    # --- Driver ---

    def run(self, program: List[Stmt]) -> ExecutionState:
        """Execute `program` from its first statement."""
        self.state.index = 0
        return self.interpret(program)

    def run_source(self, source: str) -> ExecutionState:
        return self.run(parse_program(split_statements(source)))

    def interpret(self, program: List[Stmt]) -> ExecutionState:
        """Execute from the saved index until it runs past the last statement."""
        self.state.steps = 0
        total = len(program)
        while self.state.index < total:
            self._check_budget()
            self.state.index = self.execute(program[self.state.index], self.state.index)
            self.state.steps += 1
        logger.debug("halted at line %d after %d steps", self.state.index + 1, self.state.steps)
        return self.state

    def _check_budget(self):
        index = self.state.index
        max_steps = self.config.max_steps
        if max_steps is not None and self.state.steps >= max_steps:
            logger.debug("step budget of %d exhausted at line %d", max_steps, index + 1)
            raise StepLimitExceededError(
                f"Execution stopped after {max_steps} steps (possible infinite loop)", index)
        if self.should_stop is not None and self.should_stop():
            raise ExecutionCancelledError("Execution cancelled", index)

    # --- Executor ---

    def execute(self, stmt: Stmt, index: int) -> int:
        """Run one statement and return the index of the next one."""
        if self.tracer is not None:
            self.tracer.on_statement(stmt.text, index)

        visitor = self._stmt_visitors.get(type(stmt))
        if visitor is None:
            raise InterpreterError(f"No visit method for {type(stmt).__name__}", index, stmt.text)
        next_index = visitor(stmt, index)

        if self.tracer is not None:
            self.tracer.on_step(index, self.variables.snapshot(), self.loops.frames())
        return next_index

    def visit_ClearStmt(self, stmt: ClearStmt, index: int) -> int:
        self.variables.clear(stmt.name)
        return index + 1

    def visit_IncrStmt(self, stmt: IncrStmt, index: int) -> int:
        self.variables.increment(stmt.name)
        return index + 1

    def visit_DecrStmt(self, stmt: DecrStmt, index: int) -> int:
        self.variables.decrement(stmt.name)
        return index + 1

    def visit_WhileStmt(self, stmt: WhileStmt, index: int) -> int:
        self.variables.ensure(stmt.counter)
        top = self.loops.peek()
        if (self.config.loop_policy is LoopPolicy.STABLE
                and top is not None and top.origin_index == index):
            # Reached through the backward jump of our own `end`
            return index + 1
        self.loops.push(LoopFrame(stmt.counter, stmt.bound, index))
        return index + 1

    def visit_EndStmt(self, stmt: EndStmt, index: int) -> int:
        frame = self.loops.peek()
        if frame is None:
            raise UnbalancedLoopError(
                "'end' has no matching 'while'", index, stmt.text)
        if not frame.is_satisfied(self.variables.get(frame.counter)):
            if self.tracer is not None:
                self.tracer.on_jump(frame.origin_index)
            logger.debug("line %d: jump back to line %d", index + 1, frame.origin_index + 1)
            return frame.origin_index
        self.loops.pop()
        return index + 1

    def visit_NoOpStmt(self, stmt: NoOpStmt, index: int) -> int:
        return index + 1

    # --- Results ---

    def format_results(self, indent: str = "") -> List[str]:
        """Variable listing followed by any loop frames still open."""
        lines = self.variables.format_lines() + self.loops.format_lines()
        return [indent + line for line in lines]
