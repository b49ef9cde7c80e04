"""CLI entry point for ssmrequest."""

from __future__ import annotations

import functools
import json
import logging
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler

from ssmrequest import __version__, builder
from ssmrequest.executor import ExecutionError, execute, make_client
from ssmrequest.formatters import render_descriptor
from ssmrequest.models import (
    InstanceInformationFilter,
    InvalidParameterTypeError,
    ParameterFilter,
    RequestDescriptor,
)

console = Console()


def _abort(msg: str) -> None:
    console.print(f"[bold red]Error:[/] {msg}")
    sys.exit(1)


def _split_values(raw: str) -> list[str]:
    return [v for v in raw.split(",") if v]


def _parse_parameter_filters(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[ParameterFilter] | None:
    """Parse ``KEY:OPTION:V1,V2`` strings into :class:`ParameterFilter` objects."""
    if not value:
        return None
    filters = []
    for raw in value:
        parts = raw.split(":", 2)
        if len(parts) != 3 or not parts[0] or not parts[1]:
            raise click.BadParameter(f"{raw!r} is not in KEY:OPTION:VALUES form.")
        key, option, values = parts
        filters.append(ParameterFilter(key=key, option=option, values=_split_values(values)))
    return filters


def _parse_instance_filters(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[InstanceInformationFilter]:
    """Parse ``KEY=V1,V2`` strings into :class:`InstanceInformationFilter` objects."""
    filters = []
    for raw in value:
        key, sep, values = raw.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"{raw!r} is not in KEY=VALUES form.")
        filters.append(InstanceInformationFilter(key=key, values=_split_values(values)))
    return filters


def _request_options(func: Callable[..., RequestDescriptor]) -> Callable[..., None]:
    """Add the shared output/send options and emit the built descriptor.

    The wrapped command returns a :class:`RequestDescriptor`; this decorator
    either prints it or sends it through boto3.
    """

    @click.option(
        "--output",
        type=click.Choice(["json", "table"]),
        default="json",
        help="Descriptor output format (default: json).",
    )
    @click.option(
        "--show-secrets",
        is_flag=True,
        default=False,
        help="Show SecureString values in table output (default: redacted).",
    )
    @click.option("--send", is_flag=True, default=False, help="Execute the request via boto3.")
    @click.option("--profile", default=None, help="AWS named profile (with --send).")
    @click.option("--region", default=None, help="AWS region (with --send).")
    @functools.wraps(func)
    def wrapper(
        *args: Any,
        output: str,
        show_secrets: bool,
        send: bool,
        profile: str | None,
        region: str | None,
        **kwargs: Any,
    ) -> None:
        try:
            descriptor = func(*args, **kwargs)
        except InvalidParameterTypeError as exc:
            _abort(str(exc))
            return

        if not send:
            if output == "table":
                console.print(render_descriptor(descriptor, show_secrets=show_secrets))
            else:
                click.echo(json.dumps(descriptor.to_dict(), indent=2))
            return

        try:
            response = execute(descriptor, make_client(profile, region))
        except ExecutionError as exc:
            _abort(str(exc))
            return
        click.echo(json.dumps(response, indent=2, default=str))

    return wrapper


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(__version__, "--version", "-V")
def main(verbose: bool) -> None:
    """Build (and optionally send) AWS SSM Parameter Store requests.

    Each subcommand prints the request descriptor it would send. Pass
    --send to execute it with boto3 instead.

    \b
    Examples:
      ssmrequest get-parameter --with-decryption /db/password
      ssmrequest put-parameter --overwrite /app/flag string_list a,b
      ssmrequest get-parameters-by-path --recursive --filter Type:Equals:SecureString /app
      ssmrequest describe-instance-information --filter PingStatus=Online --send
    """
    pkg_logger = logging.getLogger("ssmrequest")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.handlers = [RichHandler(console=Console(stderr=True), show_path=False)]


@main.command("get-parameter")
@click.argument("name")
@click.option("--with-decryption", is_flag=True, default=False, help="Decrypt SecureStrings.")
@_request_options
def get_parameter_cmd(name: str, with_decryption: bool) -> RequestDescriptor:
    """Fetch one parameter."""
    return builder.get_parameter(name, with_decryption=with_decryption)


@main.command("get-parameters")
@click.argument("names", nargs=-1, required=True)
@click.option("--with-decryption", is_flag=True, default=False, help="Decrypt SecureStrings.")
@_request_options
def get_parameters_cmd(names: tuple[str, ...], with_decryption: bool) -> RequestDescriptor:
    """Fetch several parameters in one call."""
    return builder.get_parameters(list(names), with_decryption=with_decryption)


@main.command("get-parameters-by-path")
@click.argument("path")
@click.option("--recursive", "-r", is_flag=True, default=False, help="Descend into sub-paths.")
@click.option("--with-decryption", is_flag=True, default=False, help="Decrypt SecureStrings.")
@click.option(
    "--filter",
    "-f",
    "parameter_filters",
    multiple=True,
    callback=_parse_parameter_filters,
    help="Parameter filter as KEY:OPTION:V1,V2 (repeatable).",
)
@click.option("--max-results", type=click.IntRange(min=1), default=None, help="Page size.")
@click.option("--next-token", default=None, help="Continuation token.")
@_request_options
def get_parameters_by_path_cmd(
    path: str,
    recursive: bool,
    with_decryption: bool,
    parameter_filters: list[ParameterFilter] | None,
    max_results: int | None,
    next_token: str | None,
) -> RequestDescriptor:
    """Fetch parameters in a hierarchy."""
    return builder.get_parameters_by_path(
        path,
        recursive=recursive,
        with_decryption=with_decryption,
        parameter_filters=parameter_filters,
        max_results=max_results,
        next_token=next_token,
    )


@main.command("put-parameter")
@click.argument("name")
@click.argument("value_type", metavar="TYPE")
@click.argument("value")
@click.option(
    "--overwrite/--no-overwrite",
    default=False,
    help="Overwrite an existing parameter (default: no).",
)
@click.option("--description", default="", help="Parameter description.")
@click.option("--key-id", default=None, help="KMS key for SecureString values.")
@click.option("--allowed-pattern", default=None, help="Regex the value must match.")
@_request_options
def put_parameter_cmd(
    name: str,
    value_type: str,
    value: str,
    overwrite: bool,
    description: str,
    key_id: str | None,
    allowed_pattern: str | None,
) -> RequestDescriptor:
    """Create or update a parameter.

    TYPE is one of string, string_list or secure_string.
    """
    return builder.put_parameter(
        name,
        value_type,
        value,
        overwrite=overwrite,
        description=description,
        key_id=key_id,
        allowed_pattern=allowed_pattern,
    )


@main.command("delete-parameter")
@click.argument("name")
@_request_options
def delete_parameter_cmd(name: str) -> RequestDescriptor:
    """Delete one parameter."""
    return builder.delete_parameter(name)


@main.command("delete-parameters")
@click.argument("names", nargs=-1, required=True)
@_request_options
def delete_parameters_cmd(names: tuple[str, ...]) -> RequestDescriptor:
    """Delete several parameters."""
    return builder.delete_parameters(list(names))


@main.command("get-parameter-history")
@click.argument("name")
@click.option("--with-decryption", is_flag=True, default=False, help="Decrypt SecureStrings.")
@click.option("--max-results", type=click.IntRange(min=1), default=None, help="Page size.")
@click.option("--next-token", default=None, help="Continuation token.")
@_request_options
def get_parameter_history_cmd(
    name: str,
    with_decryption: bool,
    max_results: int | None,
    next_token: str | None,
) -> RequestDescriptor:
    """Show the version history of a parameter."""
    return builder.get_parameter_history(
        name,
        with_decryption=with_decryption,
        max_results=max_results,
        next_token=next_token,
    )


@main.command("describe-instance-information")
@click.option(
    "--filter",
    "-f",
    "filters",
    multiple=True,
    callback=_parse_instance_filters,
    help="Instance filter as KEY=V1,V2 (repeatable).",
)
@click.option("--max-results", type=click.IntRange(min=1), default=None, help="Page size.")
@click.option("--next-token", default=None, help="Continuation token.")
@_request_options
def describe_instance_information_cmd(
    filters: list[InstanceInformationFilter],
    max_results: int | None,
    next_token: str | None,
) -> RequestDescriptor:
    """Describe managed instances."""
    return builder.describe_instance_information(
        filters=filters,
        max_results=max_results,
        next_token=next_token,
    )
