import re
from typing import List

from lexer import Keyword, Lexer
from ast_nodes import *

# Bound literals are plain ASCII decimals (no sign, no '_' separators)
_INTEGER_LITERAL = re.compile(r'[0-9]+')


class ParserError(Exception):
    def __init__(self, message, line=0, text=""):
        super().__init__(f"line {line + 1}: {message} in statement {text!r}")
        self.line = line
        self.text = text


class MalformedStatementError(ParserError):
    """A keyword's required operand token is missing."""
    pass


class InvalidLiteralError(ParserError):
    """A `while` bound is not an integer literal."""
    pass


class Parser:
    """Decodes statement strings into Stmt nodes, one statement at a time."""

    def __init__(self, statements: List[str], first_line: int = 0):
        self.statements = statements
        self.first_line = first_line

        # Keyword → decode method; NOT/DO fall through to NoOpStmt
        self._stmt_dispatch = {
            Keyword.CLEAR: self.parse_clear,
            Keyword.INCR: self.parse_incr,
            Keyword.DECR: self.parse_decr,
            Keyword.WHILE: self.parse_while,
            Keyword.END: self.parse_end,
        }

    def parse(self) -> List[Stmt]:
        return [self.parse_statement(text, self.first_line + offset)
                for offset, text in enumerate(self.statements)]

    def parse_statement(self, text: str, line: int) -> Stmt:
        lexer = Lexer(text, line)
        tokens = lexer.tokenize()
        keyword, index = lexer.resolve_keyword()
        handler = self._stmt_dispatch.get(keyword)
        if handler is None:
            return NoOpStmt(text, line)
        return handler(text, line, tokens, index)

    # --- helpers ---

    def _operand(self, tokens, index, offset, what, text, line) -> str:
        pos = index + offset
        if pos >= len(tokens):
            raise MalformedStatementError(f"'{tokens[index]}' is missing {what}", line, text)
        return tokens[pos]

    # --- statement decoders ---

    def parse_clear(self, text, line, tokens, index):
        return ClearStmt(text, line, self._operand(tokens, index, 1, "a variable name", text, line))

    def parse_incr(self, text, line, tokens, index):
        return IncrStmt(text, line, self._operand(tokens, index, 1, "a variable name", text, line))

    def parse_decr(self, text, line, tokens, index):
        return DecrStmt(text, line, self._operand(tokens, index, 1, "a variable name", text, line))

    def parse_while(self, text, line, tokens, index):
        # while <counter> not <bound> do
        counter = self._operand(tokens, index, 1, "a counter variable", text, line)
        self._operand(tokens, index, 2, "'not'", text, line)
        literal = self._operand(tokens, index, 3, "a bound", text, line)
        if not _INTEGER_LITERAL.fullmatch(literal):
            raise InvalidLiteralError(f"bound {literal!r} is not an integer", line, text)
        return WhileStmt(text, line, counter, int(literal))

    def parse_end(self, text, line, tokens, index):
        return EndStmt(text, line)


def parse_program(statements: List[str], first_line: int = 0) -> List[Stmt]:
    return Parser(statements, first_line).parse()
