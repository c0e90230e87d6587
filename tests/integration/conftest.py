"""Integration test fixtures: LocalStack S3 and CloudFormation."""

from __future__ import annotations

import os

import boto3
import pytest

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REGION = "us-east-1"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client(
            "s3",
            region_name=REGION,
            endpoint_url=LOCALSTACK_URL,
            aws_access_key_id="test",
            aws_secret_access_key="test",
        )
        client.list_buckets()
        return True
    except Exception:
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture
def localstack_settings(monkeypatch):
    """AppSettings pointing every client at LocalStack."""
    from frontweb.core.config import AppSettings

    monkeypatch.setenv("FRONTWEB_AWS_ENDPOINT_URL", LOCALSTACK_URL)
    monkeypatch.setenv("FRONTWEB_REGION", REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test")
    return AppSettings()


@pytest.fixture
def localstack_bucket(localstack_settings):
    """A fresh website bucket, emptied and removed afterwards."""
    from frontweb.deploy import aws_client

    s3 = aws_client("s3", localstack_settings)
    bucket = "frontweb-inttest-webstack-web"
    s3.create_bucket(Bucket=bucket)
    yield bucket
    for obj in s3.list_objects_v2(Bucket=bucket).get("Contents", []):
        s3.delete_object(Bucket=bucket, Key=obj["Key"])
    s3.delete_bucket(Bucket=bucket)
