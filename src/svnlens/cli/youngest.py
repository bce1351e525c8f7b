"""svnlens youngest command - print the latest revision number."""

import click

from svnlens.cli.utils import credential_options, open_ops, svn_errors


@click.command()
@click.argument("url")
@credential_options
@click.pass_context
@svn_errors
def youngest_command(
    ctx: click.Context, url: str, username: str | None, password: str | None
) -> None:
    """Print the youngest revision of the repository at URL."""
    ops = open_ops(ctx, url, username, password)
    click.echo(ops.latest_revision())
