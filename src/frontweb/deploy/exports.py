"""CloudFormation export lookup."""

from __future__ import annotations

from typing import Any

from botocore.exceptions import ClientError

from frontweb.core.exceptions import ExportLookupError


def list_exports(client: Any) -> dict[str, str]:
    """Return every export in the client's region as ``{name: value}``."""
    try:
        exports: dict[str, str] = {}
        paginator = client.get_paginator("list_exports")
        for page in paginator.paginate():
            for export in page.get("Exports", []):
                exports[export["Name"]] = export["Value"]
        return exports
    except ClientError as exc:
        raise ExportLookupError(f"Listing CloudFormation exports failed: {exc}") from exc
