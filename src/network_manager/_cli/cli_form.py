from typing import Dict

import click

from .._config import Config
from .._services import NetworkManager
from ..models import NetworkError
from ._utils._common import exit_with_error, parse_fields, parse_headers


@click.command()
@click.argument("url")
@click.option(
    "--field",
    "-f",
    "fields",
    multiple=True,
    callback=parse_fields,
    help="Form field as 'name=value'. Repeatable.",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    callback=parse_headers,
    help="Request header as 'Name: value'. Repeatable.",
)
@click.pass_obj
def form(
    config: Config, url: str, fields: Dict[str, str], headers: Dict[str, str]
) -> None:
    """POST multipart/form-data fields and print the raw response."""
    with NetworkManager(config=config) as manager:
        try:
            body = manager.post_form_data(url, fields, headers=headers or None)
        except NetworkError as e:
            exit_with_error(e)

    click.echo(body.decode("utf-8", errors="replace"))
