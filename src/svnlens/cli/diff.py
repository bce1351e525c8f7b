"""svnlens diff command - show the diff of one revision."""

import json

import click

from svnlens.cli.utils import credential_options, open_ops, svn_errors


@click.command()
@click.argument("url")
@click.option("-r", "--revision", required=True, help="Revision number or HEAD")
@click.option("--structured", is_flag=True, help="Summarize per-path file and property diffs")
@click.option("--json", "as_json", is_flag=True, help="Output the structured summary as JSON")
@credential_options
@click.pass_context
@svn_errors
def diff_command(
    ctx: click.Context,
    url: str,
    revision: str,
    structured: bool,
    as_json: bool,
    username: str | None,
    password: str | None,
) -> None:
    """Show file and property changes of one revision.

    URL must be a file:// URL of a repository directory (not a working copy).
    """
    ops = open_ops(ctx, url, username, password)

    if not structured and not as_json:
        output = ops.raw_diff(revision)
        stdout = click.get_binary_stream("stdout")
        stdout.write(output or b"")
        stdout.flush()
        return

    result = ops.structured_diff(revision)
    summary = {
        "files": {path: len(body) for path, body in sorted(result.files.items())},
        "properties": {path: len(body) for path, body in sorted(result.properties.items())},
    }
    if as_json:
        click.echo(json.dumps(summary, indent=2))
        return

    for path, size in summary["files"].items():
        click.echo(f"file      {path} ({size} bytes)")
    for path, size in summary["properties"].items():
        click.echo(f"property  {path} ({size} bytes)")
