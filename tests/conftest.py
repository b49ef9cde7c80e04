"""Shared pytest fixtures for ssmrequest tests."""

from __future__ import annotations

import os

import boto3
import pytest
from moto import mock_aws


@pytest.fixture()
def aws_credentials():
    """Ensure moto doesn't try to use real AWS credentials."""
    os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
    os.environ.setdefault("AWS_SESSION_TOKEN", "testing")


@pytest.fixture()
def ssm_client(aws_credentials):
    """A moto-mocked SSM client with a few parameters pre-loaded."""
    with mock_aws():
        client = boto3.client("ssm", region_name="us-east-1")
        client.put_parameter(Name="/app/prod/db/host", Value="prod-db.example.com", Type="String")
        client.put_parameter(Name="/app/prod/db/port", Value="5432", Type="String")
        client.put_parameter(
            Name="/app/prod/db/password", Value="FAKE-test-password", Type="SecureString"
        )
        client.put_parameter(
            Name="/app/prod/feature_flags", Value="dark_mode,beta_ui", Type="StringList"
        )
        yield client
