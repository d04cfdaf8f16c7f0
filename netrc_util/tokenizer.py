"""Whitespace tokenizer for netrc text.

Tokens are maximal runs of non-whitespace characters. The tokenizer only
splits; deciding what a token means is the reader's job. Two raw-text
operations let the reader step outside the token stream: skipping the rest
of a line (comments) and reading a macro body verbatim.
"""

import re
from dataclasses import dataclass

_NON_SPACE = re.compile(r"\S")
_WORD = re.compile(r"\S+")


@dataclass(frozen=True)
class Token:
    """A word from the input and its 1-based position."""

    text: str
    line: int
    column: int


class Tokenizer:
    """Scans netrc text one token at a time."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self._line_start = 0

    def _advance(self, new_pos: int) -> None:
        """Move to new_pos, keeping line bookkeeping current."""
        newlines = self.text.count("\n", self.pos, new_pos)
        if newlines:
            self.line += newlines
            self._line_start = self.text.rfind("\n", self.pos, new_pos) + 1
        self.pos = new_pos

    def next_token(self) -> Token | None:
        """Return the next token, or None at end of input."""
        start = _NON_SPACE.search(self.text, self.pos)
        if start is None:
            self._advance(len(self.text))
            return None
        self._advance(start.start())

        word = _WORD.match(self.text, self.pos)
        token = Token(word.group(), self.line, self.pos - self._line_start + 1)
        self._advance(word.end())
        return token

    def skip_line(self) -> None:
        """Discard everything up to and including the next newline."""
        end = self.text.find("\n", self.pos)
        self._advance(len(self.text) if end == -1 else end + 1)

    def read_macro_body(self) -> str:
        """Read lines verbatim up to the first empty line.

        The terminating empty line is consumed but not part of the body.
        Without a terminator the body runs to end of input.
        """
        start = self.pos
        while self.pos < len(self.text):
            end = self.text.find("\n", self.pos)
            if end == -1:
                self._advance(len(self.text))
                break
            if self.text[self.pos:end].rstrip("\r") == "":
                body = self.text[start:self.pos]
                self._advance(end + 1)
                return body
            self._advance(end + 1)
        return self.text[start:self.pos]

    def __iter__(self):
        while (token := self.next_token()) is not None:
            yield token
