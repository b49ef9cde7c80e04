"""Send request descriptors through a boto3 SSM client."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

import boto3
from botocore import xform_name
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ssmrequest.models import SERVICE, RequestDescriptor

if TYPE_CHECKING:
    from mypy_boto3_ssm import SSMClient

logger = logging.getLogger(__name__)

_ARN_RE = re.compile(r"arn:aws[a-zA-Z-]*:[a-zA-Z0-9-]+:\S+")
_ACCOUNT_RE = re.compile(r"\b\d{12}\b")

_RETRY_CONFIG = Config(retries={"max_attempts": 5, "mode": "adaptive"})


class ExecutionError(Exception):
    """Raised when a request descriptor cannot be sent or the SSM API call fails."""


def _sanitize_error(msg: str) -> str:
    """Strip ARNs and AWS account IDs from error messages."""
    msg = _ARN_RE.sub("arn:***", msg)
    msg = _ACCOUNT_RE.sub("***", msg)
    return msg


def make_client(profile: str | None = None, region: str | None = None) -> SSMClient:
    session = boto3.Session(profile_name=profile, region_name=region)
    return session.client("ssm", config=_RETRY_CONFIG)  # type: ignore[return-value]


def execute(descriptor: RequestDescriptor, client: SSMClient) -> dict[str, Any]:
    """Perform the call described by *descriptor* with *client*.

    Signing, transport and retries are left to botocore.

    Returns:
        The decoded response with ``ResponseMetadata`` removed.

    Raises:
        ExecutionError: If the descriptor is not an SSM request, or on any
            AWS API error.
    """
    if descriptor.service != SERVICE:
        raise ExecutionError(f"Cannot execute {descriptor.service!r} request with an SSM client")

    method = getattr(client, xform_name(descriptor.operation), None)
    if method is None:
        raise ExecutionError(f"SSM client does not support operation {descriptor.operation}")

    logger.debug("Sending %s", descriptor.target)
    try:
        response = method(**descriptor.data)
    except (ClientError, BotoCoreError) as exc:
        sanitized = _sanitize_error(str(exc))
        raise ExecutionError(f"{descriptor.operation} failed: {sanitized}") from exc

    response = dict(response)
    response.pop("ResponseMetadata", None)
    return response


def paginate(
    build: Callable[..., RequestDescriptor],
    client: SSMClient,
    *args: Any,
    **kwargs: Any,
) -> Iterator[dict[str, Any]]:
    """Yield every page of a paginated operation.

    *build* is a builder function accepting ``next_token`` (for example
    :func:`~ssmrequest.builder.get_parameters_by_path`); *args* and *kwargs*
    are forwarded to it on every page.

    Raises:
        ExecutionError: On any AWS API error.
    """
    next_token = kwargs.pop("next_token", None)
    pages = 0
    while True:
        response = execute(build(*args, next_token=next_token, **kwargs), client)
        pages += 1
        yield response
        next_token = response.get("NextToken")
        if not next_token:
            break
    logger.info("Fetched %d page(s)", pages)
