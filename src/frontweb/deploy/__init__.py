"""Post-deploy tools invoked by the pipeline's build steps."""

from __future__ import annotations

from typing import Any

import boto3

from frontweb.core.config import AppSettings


def aws_client(service: str, settings: AppSettings | None = None) -> Any:
    """Create a boto3 client for ``service`` from application settings."""
    if settings is None:
        settings = AppSettings()

    kwargs: dict[str, Any] = {"region_name": settings.region}
    if settings.aws.endpoint_url:
        kwargs["endpoint_url"] = settings.aws.endpoint_url
    return boto3.client(service, **kwargs)
