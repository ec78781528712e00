"""Parser for prerequisite expression text.

Grammar (keywords are case-insensitive)::

    expr   := term ("or" term)*
    term   := factor ("and" factor)*
    factor := "(" expr ")" | UNIT_CODE | INTEGER "cp"

A unit code is any run of letters, digits, '_' and '-' starting with a
letter or digit, other than a keyword or a credit point amount.

Examples:
    "IFB104"                      -> UnitPrereq("IFB104")
    "IFB104 and (CAB201 or IFB130)"
    "48cp"                        -> CreditPointsPrereq(48)
    ""                            -> NoPrereq()
"""

import re

from ..exceptions import PrereqSyntaxError
from ..models import (
    AndPrereq,
    CreditPointsPrereq,
    NoPrereq,
    OrPrereq,
    Prereq,
    UnitPrereq,
)

TOKEN_PATTERN = re.compile(
    r"""
    \s*(?:
        (?P<lparen>\()
      | (?P<rparen>\))
      | (?P<credit>\d+)\s*cp(?![\w\-])
      | (?P<keyword>and|or)(?![\w\-])
      | (?P<unit>[A-Za-z0-9][\w\-]*)
    )
    """,
    re.IGNORECASE | re.VERBOSE,
)


def tokenize(text: str) -> list[tuple[str, str, int]]:
    """Split prerequisite text into (kind, value, position) tokens."""
    tokens = []
    position = 0
    while position < len(text):
        if text[position:].strip() == "":
            break
        match = TOKEN_PATTERN.match(text, position)
        if not match:
            start = len(text) - len(text[position:].lstrip())
            raise PrereqSyntaxError(text, start, "unexpected character")
        kind = match.lastgroup
        value = match.group(kind)
        if kind == "keyword":
            value = value.lower()
        elif kind == "unit":
            value = value.upper()
        tokens.append((kind, value, match.start(kind)))
        position = match.end()
    return tokens


class PrereqParser:
    """Recursive descent parser producing Prereq expressions."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    def parse(self) -> Prereq:
        """Parse the whole text into a single expression."""
        if not self.tokens:
            return NoPrereq()
        result = self._expr()
        if self.index < len(self.tokens):
            _, value, position = self.tokens[self.index]
            raise PrereqSyntaxError(self.text, position, f"unexpected '{value}'")
        return result

    def _peek(self) -> tuple[str, str, int] | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _is_keyword(self, keyword: str) -> bool:
        token = self._peek()
        return token is not None and token[0] == "keyword" and token[1] == keyword

    def _expr(self) -> Prereq:
        items = [self._term()]
        while self._is_keyword("or"):
            self.index += 1
            items.append(self._term())
        return items[0] if len(items) == 1 else OrPrereq(tuple(items))

    def _term(self) -> Prereq:
        items = [self._factor()]
        while self._is_keyword("and"):
            self.index += 1
            items.append(self._factor())
        return items[0] if len(items) == 1 else AndPrereq(tuple(items))

    def _factor(self) -> Prereq:
        token = self._peek()
        if token is None:
            raise PrereqSyntaxError(self.text, len(self.text), "unexpected end of expression")

        kind, value, position = token
        self.index += 1
        if kind == "unit":
            return UnitPrereq(value)
        if kind == "credit":
            return CreditPointsPrereq(int(value))
        if kind == "lparen":
            inner = self._expr()
            closing = self._peek()
            if closing is None or closing[0] != "rparen":
                raise PrereqSyntaxError(self.text, position, "unbalanced parenthesis")
            self.index += 1
            return inner
        raise PrereqSyntaxError(self.text, position, f"unexpected '{value}'")


def parse_prereq(text: str | None) -> Prereq:
    """Parse prerequisite text; blank text means no prerequisite."""
    if text is None:
        return NoPrereq()
    return PrereqParser(text).parse()
