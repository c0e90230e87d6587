"""Shared fixtures: isolate settings and AWS credentials from the host environment."""

from __future__ import annotations

import os

import pytest

DEPLOY_VARS = {"WEB_BUCKET_NAME", "DISTRIBUTION_ID", "WEB_URL", "WEB_BUILD_DIR", "WEB_PROJECT_DIR"}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("FRONTWEB_") or key in DEPLOY_VARS:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_REGION", raising=False)
