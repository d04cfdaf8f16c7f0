"""Data types produced by the netrc reader."""

from dataclasses import dataclass


def _mask(secret: str | None) -> str | None:
    return None if secret is None else "****"


@dataclass(frozen=True)
class Entry:
    """One machine or default block from a netrc file.

    machine is None for the default entry. Every field is optional since
    the format allows partial entries; an unset field is None, never "".
    """

    machine: str | None = None
    login: str | None = None
    password: str | None = None
    account: str | None = None

    @property
    def is_default(self) -> bool:
        return self.machine is None

    def __repr__(self) -> str:
        return (
            f"Entry(machine={self.machine!r}, login={self.login!r}, "
            f"password={_mask(self.password)!r}, account={self.account!r})"
        )


@dataclass(frozen=True)
class Macro:
    """A macdef block. The body is kept verbatim and never tokenized."""

    name: str
    body: str


@dataclass(frozen=True)
class Credential:
    """A matched entry that is usable for authentication."""

    machine: str | None  # None when resolved through the default entry
    login: str | None
    password: str

    def __repr__(self) -> str:
        return (
            f"Credential(machine={self.machine!r}, login={self.login!r}, "
            f"password='****')"
        )


@dataclass(frozen=True)
class NetrcDocument:
    """Parsed netrc file: entries and macros in file order."""

    entries: tuple[Entry, ...] = ()
    macros: tuple[Macro, ...] = ()

    @property
    def default(self) -> Entry | None:
        for entry in self.entries:
            if entry.is_default:
                return entry
        return None

    @property
    def machines(self) -> list[str]:
        return [e.machine for e in self.entries if e.machine is not None]
