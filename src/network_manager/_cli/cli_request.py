import json
from typing import Any, Dict, Optional

import click

from .._config import Config
from .._services import NetworkManager
from ..models import HTTPMethod, JsonValue, NetworkError
from ._utils._common import exit_with_error, parse_headers, parse_json_object


@click.command()
@click.argument("url")
@click.option(
    "--method",
    "-X",
    type=click.Choice([m.value for m in HTTPMethod], case_sensitive=False),
    default=HTTPMethod.GET.value,
    show_default=True,
    help="HTTP verb",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    callback=parse_headers,
    help="Request header as 'Name: value'. Repeatable.",
)
@click.option(
    "--data",
    "-d",
    callback=parse_json_object,
    help="JSON object sent as the request body",
)
@click.pass_obj
def request(
    config: Config,
    url: str,
    method: str,
    headers: Dict[str, str],
    data: Optional[Dict[str, Any]],
) -> None:
    """Send a request and print the decoded JSON response."""
    with NetworkManager(config=config) as manager:
        try:
            result = manager.request(
                url,
                HTTPMethod(method),
                response_type=JsonValue,
                parameters=data,
                headers=headers or None,
            )
        except NetworkError as e:
            exit_with_error(e)

    click.echo(json.dumps(result, indent=2))
