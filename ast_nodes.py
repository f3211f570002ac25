from dataclasses import dataclass


@dataclass
class Stmt:
    """Base class for all decoded statements.

    text: the raw statement as produced by the splitter
    line: 0-based position in the program (the jump address)
    """
    text: str
    line: int


@dataclass
class ClearStmt(Stmt):
    name: str


@dataclass
class IncrStmt(Stmt):
    name: str


@dataclass
class DecrStmt(Stmt):
    name: str


@dataclass
class WhileStmt(Stmt):
    """
    while <counter> not <bound> do;
    The condition is only tested by the matching `end`.
    """
    counter: str
    bound: int


@dataclass
class EndStmt(Stmt):
    pass


@dataclass
class NoOpStmt(Stmt):
    """Statement without an executable keyword (blank, `do`, `not`, ...)."""
    pass
