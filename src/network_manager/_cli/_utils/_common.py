import json
from typing import Any, Dict, NoReturn, Optional, Tuple

import click

from ...models import NetworkError


def parse_headers(
    ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]
) -> Dict[str, str]:
    """Click callback turning ``Name: value`` options into a dict."""
    headers: Dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected 'Name: value', got {raw!r}")
        headers[name.strip()] = value.strip()
    return headers


def parse_fields(
    ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]
) -> Dict[str, str]:
    """Click callback turning ``name=value`` options into a dict."""
    fields: Dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected 'name=value', got {raw!r}")
        fields[name] = value
    return fields


def parse_json_object(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[Dict[str, Any]]:
    """Click callback parsing a JSON object given on the command line."""
    if value is None:
        return None
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise click.BadParameter("expected a JSON object")
    return data


def exit_with_error(error: NetworkError) -> NoReturn:
    click.echo(f"Error: {error.kind}: {error.message}", err=True)
    raise click.exceptions.Exit(1)
