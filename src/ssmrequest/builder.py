"""Build SSM Parameter Store request descriptors.

Every function here is a pure mapping from arguments to a
:class:`~ssmrequest.models.RequestDescriptor`; nothing is sent.  Hand the
result to :func:`ssmrequest.executor.execute` (or any other executor that
understands the descriptor shape) to perform the call.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ssmrequest.models import (
    CONTENT_TYPE,
    TARGET_PREFIX,
    InstanceInformationFilter,
    ParameterFilter,
    ParameterValueType,
    RequestDescriptor,
)

logger = logging.getLogger(__name__)

ACTIONS: dict[str, str] = {
    "get_parameter": "GetParameter",
    "get_parameters": "GetParameters",
    "get_parameters_by_path": "GetParametersByPath",
    "put_parameter": "PutParameter",
    "delete_parameter": "DeleteParameter",
    "delete_parameters": "DeleteParameters",
    "get_parameter_history": "GetParameterHistory",
    "describe_instance_information": "DescribeInstanceInformation",
}


def _request(action: str, data: dict[str, Any]) -> RequestDescriptor:
    operation = ACTIONS[action]
    logger.debug("Built %s request with fields %s", operation, sorted(data))
    return RequestDescriptor(
        operation=operation,
        data=data,
        headers=(
            ("x-amz-target", f"{TARGET_PREFIX}.{operation}"),
            ("content-type", CONTENT_TYPE),
        ),
    )


def _maybe_add(data: dict[str, Any], key: str, value: Any) -> dict[str, Any]:
    # None means "not supplied"; 0 and "" are real values and go on the wire.
    if value is not None:
        data[key] = value
    return data


def _add_pagination(
    data: dict[str, Any], max_results: int | None, next_token: str | None
) -> dict[str, Any]:
    _maybe_add(data, "MaxResults", max_results)
    _maybe_add(data, "NextToken", next_token)
    return data


def _parameter_filter_to_wire(item: ParameterFilter | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(item, ParameterFilter):
        return item.to_wire()
    return {
        "Key": item.get("key"),
        "Option": item.get("option"),
        "Values": copy.deepcopy(item.get("values")),
    }


def _instance_filter_to_wire(item: Any) -> Any:
    if isinstance(item, InstanceInformationFilter):
        return item.to_wire()
    return copy.deepcopy(item)


def get_parameter(name: str, *, with_decryption: bool = False) -> RequestDescriptor:
    """Get information about a single parameter by name."""
    return _request(
        "get_parameter",
        {"Name": name, "WithDecryption": with_decryption or False},
    )


def get_parameters(
    names: Sequence[str], *, with_decryption: bool = False
) -> RequestDescriptor:
    """Get details of several parameters in one call."""
    return _request(
        "get_parameters",
        {"Names": list(names), "WithDecryption": with_decryption or False},
    )


def get_parameters_by_path(
    path: str,
    *,
    recursive: bool = False,
    with_decryption: bool = False,
    parameter_filters: list[ParameterFilter | Mapping[str, Any]] | None = None,
    max_results: int | None = None,
    next_token: str | None = None,
) -> RequestDescriptor:
    """Retrieve parameters in a specific hierarchy.

    Args:
        path: Hierarchy prefix, e.g. ``"/app/prod"``.
        recursive: Descend into every level below *path*.
        with_decryption: Return decrypted ``SecureString`` values.
        parameter_filters: :class:`ParameterFilter` objects, or mappings with
            ``key``/``option``/``values`` entries.  ``ParameterFilters`` is
            only sent when this is a ``list``; anything else omits it.
        max_results: Page size, sent only when given.
        next_token: Continuation token from a previous page, sent only when given.
    """
    data = _add_pagination(
        {
            "Path": path,
            "Recursive": recursive or False,
            "WithDecryption": with_decryption or False,
        },
        max_results,
        next_token,
    )
    if isinstance(parameter_filters, list):
        data["ParameterFilters"] = [_parameter_filter_to_wire(f) for f in parameter_filters]
    return _request("get_parameters_by_path", data)


def put_parameter(
    name: str,
    type_: ParameterValueType | str,
    value: str,
    *,
    overwrite: bool = False,
    description: str = "",
    key_id: str | None = None,
    allowed_pattern: str | None = None,
) -> RequestDescriptor:
    """Add a parameter to the system, or overwrite an existing one.

    Args:
        name: Fully qualified parameter name.
        type_: One of ``"string"``, ``"string_list"``, ``"secure_string"``
            (or the matching :class:`ParameterValueType` member).
        value: Parameter value.
        overwrite: Replace an existing parameter of the same name.
        description: Free-form description, sent as ``""`` when omitted.
        key_id: KMS key for ``SecureString`` values, sent only when given.
        allowed_pattern: Regex the value must match, sent only when given.

    Raises:
        InvalidParameterTypeError: If *type_* is not a supported value type.
    """
    value_type = ParameterValueType.parse(type_)
    data = {
        "Name": name,
        "Overwrite": overwrite or False,
        "Value": value,
        "Type": value_type.wire_name,
        "Description": description or "",
    }
    _maybe_add(data, "KeyId", key_id)
    _maybe_add(data, "AllowedPattern", allowed_pattern)
    return _request("put_parameter", data)


def delete_parameter(name: str) -> RequestDescriptor:
    """Delete a parameter from the system."""
    return _request("delete_parameter", {"Name": name})


def delete_parameters(names: Sequence[str]) -> RequestDescriptor:
    """Delete a list of parameters."""
    return _request("delete_parameters", {"Names": list(names)})


def get_parameter_history(
    name: str,
    *,
    with_decryption: bool = False,
    max_results: int | None = None,
    next_token: str | None = None,
) -> RequestDescriptor:
    """Retrieve the version history of a parameter."""
    data = _add_pagination(
        {"Name": name, "WithDecryption": with_decryption or False},
        max_results,
        next_token,
    )
    return _request("get_parameter_history", data)


def describe_instance_information(
    *,
    filters: Sequence[InstanceInformationFilter | Mapping[str, Any]] | None = None,
    max_results: int | None = None,
    next_token: str | None = None,
) -> RequestDescriptor:
    """Describe managed instances.

    ``Filters`` is always sent (``[]`` by default), unlike ``ParameterFilters``
    on :func:`get_parameters_by_path`.
    """
    data = _add_pagination(
        {"Filters": [_instance_filter_to_wire(f) for f in filters or []]},
        max_results,
        next_token,
    )
    return _request("describe_instance_information", data)
