"""Recursive-descent reader turning netrc text into a NetrcDocument.

Grammar (keywords are lower case, arguments are single tokens):

    document := item*
    item     := entry | macro | comment
    entry    := ("machine" NAME | "default") (field | macro | comment)*
    field    := ("login" | "password" | "account") VALUE
    macro    := "macdef" NAME <lines up to an empty line>
    comment  := "#..." <rest of line>
"""

import logging

from .errors import (
    DuplicateDefault,
    TokenOutsideEntry,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .models import Entry, Macro, NetrcDocument
from .tokenizer import Token, Tokenizer

log = logging.getLogger(__name__)

MACHINE = "machine"
DEFAULT = "default"
MACDEF = "macdef"
FIELDS = ("login", "password", "account")
ENTRY_KEYWORDS = (MACHINE, DEFAULT)


class Reader:
    """Reads one document from netrc text.

    Args:
        text: Raw netrc content
        strict: Raise UnexpectedToken on unknown keywords instead of
            skipping them
        comments: Treat tokens starting with "#" in keyword position as
            comments running to end of line
    """

    def __init__(self, text: str, strict: bool = True, comments: bool = True):
        self._tokens = Tokenizer(text)
        self._peeked: Token | None = None
        self.strict = strict
        self.comments = comments

        self._entries: list[Entry] = []
        self._macros: list[Macro] = []
        self._seen_default = False

    def _peek(self) -> Token | None:
        if self._peeked is None:
            self._peeked = self._tokens.next_token()
        return self._peeked

    def _next(self) -> Token | None:
        token = self._peek()
        self._peeked = None
        return token

    def _argument(self, keyword: Token, what: str) -> Token:
        """Consume the argument of keyword, taken verbatim."""
        token = self._next()
        if token is None:
            raise UnexpectedEndOfInput(
                f"Expected {what} after '{keyword.text}'",
                token=keyword.text,
                line=keyword.line,
                column=keyword.column,
            )
        return token

    def _is_comment(self, token: Token) -> bool:
        return self.comments and token.text.startswith("#")

    def _unknown(self, token: Token) -> None:
        if self.strict:
            raise UnexpectedToken(
                f"Unexpected token {token.text!r}",
                token=token.text,
                line=token.line,
                column=token.column,
            )
        log.warning(
            "Skipping unknown token %r at line %d, column %d",
            token.text,
            token.line,
            token.column,
        )

    def read(self) -> NetrcDocument:
        """Read the whole input."""
        while (token := self._next()) is not None:
            self._read_item(token)

        log.debug(
            "Parsed %d entries and %d macros",
            len(self._entries),
            len(self._macros),
        )
        return NetrcDocument(entries=tuple(self._entries), macros=tuple(self._macros))

    def _read_item(self, token: Token) -> None:
        if token.text == MACHINE:
            name = self._argument(token, "machine name")
            self._read_entry(name.text)
        elif token.text == DEFAULT:
            if self._seen_default:
                raise DuplicateDefault(
                    "Duplicate 'default' entry",
                    token=token.text,
                    line=token.line,
                    column=token.column,
                )
            self._seen_default = True
            self._read_entry(None)
        elif token.text == MACDEF:
            self._read_macro(token)
        elif self._is_comment(token):
            self._tokens.skip_line()
        elif token.text in FIELDS:
            raise TokenOutsideEntry(
                f"'{token.text}' outside of a machine or default entry",
                token=token.text,
                line=token.line,
                column=token.column,
            )
        else:
            self._unknown(token)

    def _read_entry(self, machine: str | None) -> None:
        fields: dict[str, str] = {}

        while (token := self._peek()) is not None:
            if token.text in ENTRY_KEYWORDS:
                break
            self._next()

            if token.text in FIELDS:
                fields[token.text] = self._argument(token, f"{token.text} value").text
            elif token.text == MACDEF:
                self._read_macro(token)
            elif self._is_comment(token):
                self._tokens.skip_line()
            else:
                self._unknown(token)

        self._entries.append(Entry(machine=machine, **fields))

    def _read_macro(self, keyword: Token) -> None:
        name = self._argument(keyword, "macro name")
        # The body starts on the line after the name
        self._tokens.skip_line()
        body = self._tokens.read_macro_body()
        self._macros.append(Macro(name=name.text, body=body))


def parse(text: str, strict: bool = True, comments: bool = True) -> NetrcDocument:
    """Parse netrc text into a document.

    Raises:
        ParseError: on the first structural problem in the text
    """
    return Reader(text, strict=strict, comments=comments).read()
