"""Command-line interface for netrc-util."""

import logging

import click

from .errors import InvalidHost, ParseError
from .host import Host
from .models import Entry
from .parser import Parser


def _mask(secret: str | None, show: bool = False) -> str:
    if secret is None:
        return "-"
    return secret if show else "*" * len(secret)


def _load(ctx: click.Context, file) -> Parser:
    """Read FILE and parse it with the group's options."""
    try:
        content = file.read()
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Cannot decode {file.name} as UTF-8: {e}")

    parser = Parser(
        content,
        strict=not ctx.obj["lenient"],
        comments=ctx.obj["comments"],
    )
    try:
        parser.parse()
    except ParseError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}")
    return parser


def _echo_entry(entry: Entry, show_password: bool = False) -> None:
    click.echo(f"  {entry.machine if entry.machine is not None else '(default)'}")
    click.echo(f"    Login:   {entry.login or '-'}")
    click.echo(f"    Account: {entry.account or '-'}")
    click.echo(f"    Pass:    {_mask(entry.password, show_password)}")


@click.group()
@click.version_option(package_name="netrc-util")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--lenient",
    is_flag=True,
    help="Skip unknown keywords instead of failing",
)
@click.option(
    "--no-comments",
    is_flag=True,
    help="Do not treat '#' as the start of a comment",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, lenient: bool, no_comments: bool):
    """netrc-util - inspect .netrc credential files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj["lenient"] = lenient
    ctx.obj["comments"] = not no_comments


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.pass_context
def check(ctx: click.Context, file):
    """Validate a netrc file.

    FILE is a path to a netrc file, or - for stdin.
    """
    document = _load(ctx, file).parse()

    click.echo(f"OK: {len(document.entries)} entries, {len(document.macros)} macros")
    if document.default is not None:
        click.echo("Default entry: yes")


@main.command(name="list")
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.pass_context
def list_cmd(ctx: click.Context, file):
    """List entries (passwords masked)."""
    document = _load(ctx, file).parse()

    if not document.entries:
        click.echo("No entries found.")
        return

    for entry in document.entries:
        _echo_entry(entry)
        click.echo()

    for macro in document.macros:
        click.echo(f"  macdef {macro.name} ({len(macro.body.splitlines())} lines)")


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.argument("host")
@click.option(
    "--raw",
    is_flag=True,
    help="Show the matched entry as-is, without credential rules",
)
@click.option("--show-password", is_flag=True, help="Print the password in clear")
@click.pass_context
def lookup(ctx: click.Context, file, host: str, raw: bool, show_password: bool):
    """Look up credentials for HOST."""
    try:
        target = Host.parse(host)
    except InvalidHost as e:
        raise click.ClickException(str(e))

    parser = _load(ctx, file)

    if raw:
        entry = parser.entry_for_host(target)
        if entry is None:
            raise click.ClickException(f"No entry found for: {host}")
        _echo_entry(entry, show_password)
        return

    cred = parser.credential_for_host(target)
    if cred is None:
        raise click.ClickException(f"No credentials found for: {host}")

    click.echo(f"  Host:  {cred.machine if cred.machine is not None else '(default)'}")
    click.echo(f"  Login: {cred.login or '-'}")
    click.echo(f"  Pass:  {_mask(cred.password, show_password)}")


if __name__ == "__main__":
    main()
