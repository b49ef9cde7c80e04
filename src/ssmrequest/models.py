"""Data models for ssmrequest."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

SERVICE = "ssm"
TARGET_PREFIX = "AmazonSSM"
CONTENT_TYPE = "application/x-amz-json-1.1"


class InvalidParameterTypeError(ValueError):
    """Raised when a parameter value type is outside the supported set."""


class ParameterValueType(str, enum.Enum):
    """Value types accepted by ``PutParameter``."""

    STRING = "string"
    STRING_LIST = "string_list"
    SECURE_STRING = "secure_string"

    @property
    def wire_name(self) -> str:
        return _WIRE_NAMES[self]

    @classmethod
    def parse(cls, value: ParameterValueType | str) -> ParameterValueType:
        """Coerce *value* to a member, raising :class:`InvalidParameterTypeError`."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidParameterTypeError(
                f"Invalid parameter type {value!r}; "
                f"expected one of {tuple(m.value for m in cls)}"
            ) from None


_WIRE_NAMES = {
    ParameterValueType.STRING: "String",
    ParameterValueType.STRING_LIST: "StringList",
    ParameterValueType.SECURE_STRING: "SecureString",
}


@dataclass(frozen=True)
class ParameterFilter:
    """A ``ParameterStringFilter`` narrowing a parameter query."""

    key: str               # e.g. "Type", "KeyId", "Label"
    option: str            # e.g. "Equals", "BeginsWith"
    values: list[str] = field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return {"Key": self.key, "Option": self.option, "Values": list(self.values)}


@dataclass(frozen=True)
class InstanceInformationFilter:
    """A filter for ``DescribeInstanceInformation``."""

    key: str               # e.g. "InstanceIds", "PingStatus"
    values: list[str] = field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return {"Key": self.key, "Values": list(self.values)}


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully formed, not-yet-sent SSM JSON request."""

    operation: str                     # wire action, e.g. "GetParameter"
    data: dict[str, Any]
    headers: tuple[tuple[str, str], ...]
    service: str = SERVICE
    http_method: str = "POST"
    path: str = "/"

    @property
    def target(self) -> str:
        """Value of the ``x-amz-target`` header."""
        return dict(self.headers)["x-amz-target"]

    def to_dict(self) -> dict[str, Any]:
        return {
            "service": self.service,
            "operation": self.operation,
            "http_method": self.http_method,
            "path": self.path,
            "headers": [list(h) for h in self.headers],
            "data": self.data,
        }
