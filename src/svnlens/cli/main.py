"""svnlens CLI - read-only Subversion history and diffs."""

from pathlib import Path

import click

from svnlens.cli.diff import diff_command
from svnlens.cli.log import log_command
from svnlens.cli.youngest import youngest_command
from svnlens.config import load_config
from svnlens.core.errors import ConfigError
from svnlens.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="svnlens")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config layered over ~/.config/svnlens/config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """svnlens - look into Subversion repositories without a working copy."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)


cli.add_command(log_command, name="log")
cli.add_command(youngest_command, name="youngest")
cli.add_command(diff_command, name="diff")


if __name__ == "__main__":
    cli()
