"""Rich-based formatters for ssmrequest output."""

from __future__ import annotations

import json

from rich.table import Table
from rich.text import Text

from ssmrequest.models import RequestDescriptor

_MAX_VALUE_LEN = 60
_REDACTED_LABEL = "[redacted]"


def _truncate(value: str) -> str:
    if len(value) <= _MAX_VALUE_LEN:
        return value
    return value[:_MAX_VALUE_LEN] + "…"


def _display_field(key: str, value: object, descriptor: RequestDescriptor, show_secrets: bool) -> Text:
    """Render one payload value, hiding the value of SecureString puts."""
    if (
        key == "Value"
        and descriptor.data.get("Type") == "SecureString"
        and not show_secrets
    ):
        return Text(_REDACTED_LABEL, style="dim red")
    if isinstance(value, str):
        return Text(_truncate(value), style="italic")
    return Text(_truncate(json.dumps(value)), style="cyan")


def render_descriptor(descriptor: RequestDescriptor, show_secrets: bool = False) -> Table:
    """Render a request descriptor as a two-column table.

    Args:
        descriptor: The descriptor to show.
        show_secrets: When *False*, the ``Value`` of a ``SecureString``
            ``PutParameter`` request is replaced with ``[redacted]``.

    Returns:
        A :class:`rich.table.Table`.
    """
    table = Table(
        title=f"[bold]{descriptor.http_method}[/] {descriptor.path}  {descriptor.target}",
        show_lines=False,
    )
    table.add_column("Field", style="bold green")
    table.add_column("Value")

    for name, value in descriptor.headers:
        table.add_row(Text(name, style="dim"), Text(value, style="dim"))

    for key, value in descriptor.data.items():
        table.add_row(key, _display_field(key, value, descriptor, show_secrets))

    return table
