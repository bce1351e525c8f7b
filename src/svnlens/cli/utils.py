"""CLI utilities."""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import click

from svnlens.config.models import SvnLensConfig
from svnlens.svn import SvnError, SvnOps

F = TypeVar("F", bound=Callable[..., Any])


def credential_options(func: F) -> F:
    """Add --username/--password options to a command."""
    func = click.option(
        "--password",
        help="Password (defaults to session.password from config)",
    )(func)
    func = click.option(
        "-u", "--username", help="Username (defaults to session.username from config)"
    )(func)
    return func


def open_ops(
    ctx: click.Context, url: str, username: str | None, password: str | None
) -> SvnOps:
    """Open a session for url using the session section of the loaded config."""
    config: SvnLensConfig = ctx.obj["config"]
    return SvnOps.open(url, username, password, config=config.session)


def svn_errors(func: F) -> F:
    """Report SvnError as a clean CLI error instead of a traceback."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SvnError as e:
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]
