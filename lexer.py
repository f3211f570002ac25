import re
from enum import Enum
from itertools import groupby
from typing import List, Optional, Tuple


class Keyword(Enum):
    """Reserved words of the Bare Bones language (matched case-sensitively)."""
    CLEAR = "clear"
    INCR = "incr"
    DECR = "decr"
    WHILE = "while"
    NOT = "not"
    DO = "do"
    END = "end"


# Value → Keyword lookup (avoids scanning the enum for every token)
_KEYWORDS = {kw.value: kw for kw in Keyword}

# Runs of non-word characters ([A-Za-z0-9_] are word characters)
TOKEN_SEPARATOR_PATTERN = re.compile(r'\W+', re.ASCII)


def separator_spans(source: str) -> List[Tuple[int, int]]:
    """(start, end) offsets of every statement separator in `source`.

    A separator is one ';' with any run of NON-LETTER characters on either
    side, i.e. a maximal run of non-letters that contains a ';'. Letters are
    the Unicode L* categories (str.isalpha); digits, '_', '²' and the like
    are non-letters, so `incr x1; ...` yields the statement `incr x`.
    """
    spans = []
    pos = 0
    for is_letter, group in groupby(source, key=str.isalpha):
        run = ''.join(group)
        if not is_letter and ';' in run:
            spans.append((pos, pos + len(run)))
        pos += len(run)
    return spans


def split_statements(source: str) -> List[str]:
    """Split program text into statements.

    Trailing empty statements are dropped; text containing no separator at
    all comes back as a single statement (so "" is one empty statement).
    """
    spans = separator_spans(source)
    if not spans:
        return [source]
    parts = []
    start = 0
    for sep_start, sep_end in spans:
        parts.append(source[start:sep_start])
        start = sep_end
    parts.append(source[start:])
    while parts and parts[-1] == '':
        parts.pop()
    return parts


def split_complete(text: str) -> Tuple[List[str], str]:
    """Split off the statements whose separator has already arrived.

    Returns (statements, rest) where `rest` is the text after the last
    separator, still waiting for its own `;`.
    """
    spans = separator_spans(text)
    if not spans:
        return [], text
    end = spans[-1][1]
    return split_statements(text[:end]), text[end:]


class Lexer:
    def __init__(self, statement: str, line: int = 0):
        self.statement = statement
        self.line = line
        self.tokens: List[str] = []

    def tokenize(self) -> List[str]:
        self.tokens = [t for t in TOKEN_SEPARATOR_PATTERN.split(self.statement) if t]
        return self.tokens

    def resolve_keyword(self) -> Tuple[Optional[Keyword], int]:
        """Return the first keyword token and its position, or (None, -1)."""
        if not self.tokens:
            self.tokenize()
        for i, token in enumerate(self.tokens):
            keyword = _KEYWORDS.get(token)
            if keyword is not None:
                return keyword, i
        return None, -1

    def __repr__(self):
        return f"Lexer({self.statement!r}, line={self.line + 1})"


if __name__ == "__main__":
    code = """
    clear x;
    while x not 3 do;
        incr x;
    end;
    """
    for i, stmt in enumerate(split_statements(code)):
        lexer = Lexer(stmt, i)
        print(lexer, lexer.tokenize(), lexer.resolve_keyword())
