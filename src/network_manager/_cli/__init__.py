import logging

import click
from pydantic import ValidationError

from .._config import Config
from .._version import __version__
from .cli_form import form
from .cli_request import request


@click.group()
@click.version_option(__version__, prog_name="network-manager")
@click.option("--verbose", "-v", is_flag=True, help="Enable DEBUG logging")
@click.option(
    "--log-bodies",
    is_flag=True,
    help="Include request and response bodies in DEBUG logs",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_bodies: bool) -> None:
    """Send typed HTTP requests from the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = Config.from_env()
    except ValidationError as e:
        raise click.BadParameter(
            "; ".join(error["msg"] for error in e.errors(include_url=False)),
            param_hint="NETWORK_MANAGER_* environment",
        ) from e
    if log_bodies:
        config = config.model_copy(update={"log_bodies": True})
    ctx.obj = config


cli.add_command(request)
cli.add_command(form)
