"""svnlens log command - show normalized revision history."""

import json

import click

from svnlens.cli.utils import credential_options, open_ops, svn_errors
from svnlens.svn.models import CopySource, RevisionRecord


def _format_record(record: RevisionRecord) -> str:
    when = record.timestamp.strftime("%Y-%m-%d %H:%M:%S") if record.timestamp else "-"
    lines = [f"r{record.revision} | {record.author or '(no author)'} | {when}"]
    for change in record.changes:
        info = change.path_info
        if isinstance(info, CopySource):
            target = f"{info.destination} (from {info.source}@{info.source_revision})"
        else:
            target = info
        lines.append(f"  {change.change_kind:<8} {change.node_kind:<9} {target}")
    if record.message:
        lines.append("")
        lines.extend(f"  {line}" for line in record.message.splitlines())
    return "\n".join(lines)


@click.command()
@click.argument("url")
@click.option("-r", "--revision", help="Single revision number or HEAD (default: all)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@credential_options
@click.pass_context
@svn_errors
def log_command(
    ctx: click.Context,
    url: str,
    revision: str | None,
    as_json: bool,
    username: str | None,
    password: str | None,
) -> None:
    """Show revision history of the repository at URL."""
    ops = open_ops(ctx, url, username, password)
    records = [ops.one_revision(revision)] if revision is not None else ops.all_revisions()

    if as_json:
        payload = [record.to_dict() for record in records]
        click.echo(json.dumps(payload[0] if revision is not None else payload, indent=2))
        return

    for record in records:
        click.echo(_format_record(record))
        click.echo("-" * 72)
