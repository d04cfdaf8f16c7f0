"""netrc_util - parse .netrc credential files and look up hosts."""

from .errors import (
    DuplicateDefault,
    InvalidHost,
    NetrcError,
    ParseError,
    TokenOutsideEntry,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .host import Host
from .matcher import credential_for, lookup
from .models import Credential, Entry, Macro, NetrcDocument
from .parser import Parser
from .reader import parse

__all__ = [
    "Credential",
    "DuplicateDefault",
    "Entry",
    "Host",
    "InvalidHost",
    "Macro",
    "NetrcDocument",
    "NetrcError",
    "ParseError",
    "Parser",
    "TokenOutsideEntry",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "credential_for",
    "lookup",
    "parse",
]
