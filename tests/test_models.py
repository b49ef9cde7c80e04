"""Tests for ssmrequest.models."""

from __future__ import annotations

import dataclasses

import pytest

from ssmrequest.models import (
    InstanceInformationFilter,
    InvalidParameterTypeError,
    ParameterFilter,
    ParameterValueType,
    RequestDescriptor,
)


def _make_descriptor(**kwargs) -> RequestDescriptor:
    defaults = {
        "operation": "GetParameter",
        "data": {"Name": "/a", "WithDecryption": False},
        "headers": (
            ("x-amz-target", "AmazonSSM.GetParameter"),
            ("content-type", "application/x-amz-json-1.1"),
        ),
    }
    defaults.update(kwargs)
    return RequestDescriptor(**defaults)


class TestParameterValueType:
    def test_wire_names(self):
        assert ParameterValueType.STRING.wire_name == "String"
        assert ParameterValueType.STRING_LIST.wire_name == "StringList"
        assert ParameterValueType.SECURE_STRING.wire_name == "SecureString"

    def test_parse_name(self):
        assert ParameterValueType.parse("string_list") is ParameterValueType.STRING_LIST

    def test_parse_member(self):
        member = ParameterValueType.SECURE_STRING
        assert ParameterValueType.parse(member) is member

    def test_parse_invalid(self):
        with pytest.raises(InvalidParameterTypeError, match="expected one of"):
            ParameterValueType.parse("SecureString")


class TestFilters:
    def test_parameter_filter_wire(self):
        f = ParameterFilter(key="Type", option="Equals", values=["String"])
        assert f.to_wire() == {"Key": "Type", "Option": "Equals", "Values": ["String"]}

    def test_instance_filter_wire(self):
        f = InstanceInformationFilter(key="InstanceIds", values=["i-1", "i-2"])
        assert f.to_wire() == {"Key": "InstanceIds", "Values": ["i-1", "i-2"]}

    def test_default_values_empty(self):
        assert ParameterFilter(key="Name", option="BeginsWith").values == []


class TestRequestDescriptor:
    def test_defaults(self):
        d = _make_descriptor()
        assert d.service == "ssm"
        assert d.http_method == "POST"
        assert d.path == "/"

    def test_target(self):
        assert _make_descriptor().target == "AmazonSSM.GetParameter"

    def test_frozen(self):
        d = _make_descriptor()
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.operation = "DeleteParameter"  # type: ignore[misc]

    def test_to_dict(self):
        assert _make_descriptor().to_dict() == {
            "service": "ssm",
            "operation": "GetParameter",
            "http_method": "POST",
            "path": "/",
            "headers": [
                ["x-amz-target", "AmazonSSM.GetParameter"],
                ["content-type", "application/x-amz-json-1.1"],
            ],
            "data": {"Name": "/a", "WithDecryption": False},
        }
