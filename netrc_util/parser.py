"""High-level parser bound to in-memory netrc text."""

from .host import Host
from .matcher import credential_for, lookup
from .models import Credential, Entry, NetrcDocument
from .reader import parse


class Parser:
    """Parses netrc content on first use and answers host lookups.

    No parsing happens in the constructor. The parsed document is cached
    and immutable, so a Parser can be shared between threads once parsed.

    Args:
        content: Raw netrc text (reading the file is the caller's job)
        strict: Reject unknown keywords (default) instead of skipping them
        comments: Recognize "#" comments (default True)
    """

    def __init__(self, content: str, *, strict: bool = True, comments: bool = True):
        self.content = content
        self.strict = strict
        self.comments = comments
        self._document: NetrcDocument | None = None

    def parse(self) -> NetrcDocument:
        if self._document is None:
            self._document = parse(
                self.content, strict=self.strict, comments=self.comments
            )
        return self._document

    def entry_for_host(self, host: Host) -> Entry | None:
        """Return the raw entry for host, or the default entry.

        Returns:
            None if the file is well-formed but nothing matches

        Raises:
            ParseError: if the content is malformed
        """
        return lookup(self.parse(), host)

    def credential_for_host(self, host: Host) -> Credential | None:
        """Return a credential for host, applying curl's validation rules.

        Raises:
            ParseError: if the content is malformed
        """
        return credential_for(self.parse(), host)
