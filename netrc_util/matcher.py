"""Resolve a host against a parsed netrc document."""

import logging

from .errors import InvalidHost
from .host import Host
from .models import Credential, Entry, NetrcDocument

log = logging.getLogger(__name__)


def _machine_host(entry: Entry) -> Host | None:
    try:
        return Host.parse(entry.machine)
    except InvalidHost as e:
        log.debug("Ignoring entry with unusable machine name: %s", e)
        return None


def lookup(document: NetrcDocument, host: Host) -> Entry | None:
    """Find the entry for host.

    The first machine entry (in file order) whose normalized name equals
    host wins. Otherwise the default entry is returned, wherever it sits in
    the file. Returns None when neither exists.
    """
    default = None
    for entry in document.entries:
        if entry.is_default:
            default = default or entry
        elif _machine_host(entry) == host:
            return entry
    return default


def credential_for(document: NetrcDocument, host: Host) -> Credential | None:
    """Find a usable credential for host.

    Follows curl's rules:
    - the matched entry must have a password; the login may be missing
    - a missing login is replaced by the account value
    - an incomplete machine entry does not fall back to the default, and
      fields are never mixed between the two
    """
    entry = lookup(document, host)
    if entry is None or entry.password is None:
        return None

    login = entry.login if entry.login is not None else entry.account
    return Credential(machine=entry.machine, login=login, password=entry.password)
