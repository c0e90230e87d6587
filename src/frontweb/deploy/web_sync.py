"""Mirror a local build directory into the website bucket."""

from __future__ import annotations

import hashlib
import logging
import mimetypes
from pathlib import Path
from typing import Any

from botocore.exceptions import ClientError
from pydantic import BaseModel, Field

from frontweb.core.exceptions import SyncError

logger = logging.getLogger(__name__)

STATIC_PREFIX = "static/"
NO_CACHE = "no-cache"
LONG_CACHE = "max-age=31536000"
DELETE_BATCH = 1000  # DeleteObjects limit


class SyncSummary(BaseModel):
    """Outcome of one sync pass."""

    prefix: str = ""
    uploaded: list[str] = Field(default_factory=list)
    deleted: list[str] = Field(default_factory=list)
    unchanged: int = 0


def _md5(path: Path) -> str:
    digest = hashlib.md5()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


def _content_type(path: Path) -> str:
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or "application/octet-stream"


def _excluded(key: str, exclude_prefixes: tuple[str, ...]) -> bool:
    return any(key.startswith(p) for p in exclude_prefixes)


def local_files(source_dir: Path, exclude_prefixes: tuple[str, ...] = ()) -> dict[str, Path]:
    """Files under ``source_dir`` keyed by their forward-slash relative path."""
    files: dict[str, Path] = {}
    for path in sorted(source_dir.rglob("*")):
        if not path.is_file():
            continue
        key = path.relative_to(source_dir).as_posix()
        if not _excluded(key, exclude_prefixes):
            files[key] = path
    return files


def remote_objects(client: Any, bucket: str, prefix: str = "") -> dict[str, dict[str, Any]]:
    objects: dict[str, dict[str, Any]] = {}
    paginator = client.get_paginator("list_objects_v2")
    for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
        for obj in page.get("Contents", []):
            objects[obj["Key"]] = obj
    return objects


def _unchanged(path: Path, remote: dict[str, Any] | None) -> bool:
    if remote is None or remote["Size"] != path.stat().st_size:
        return False
    etag = remote.get("ETag", "").strip('"')
    if "-" in etag:
        # multipart upload; the ETag is not an MD5 of the content, so resend
        return False
    return etag == _md5(path)


def sync_directory(
    client: Any,
    source_dir: str | Path,
    bucket: str,
    *,
    prefix: str = "",
    cache_control: str = NO_CACHE,
    exclude_prefixes: tuple[str, ...] = (),
    delete: bool = True,
) -> SyncSummary:
    """Upload new or changed files under ``prefix`` and delete stale keys."""
    source = Path(source_dir)
    if not source.is_dir():
        raise SyncError(f"Build directory not found: {source}")

    summary = SyncSummary(prefix=prefix)
    files = {f"{prefix}{key}": path for key, path in local_files(source, exclude_prefixes).items()}
    try:
        remote = {
            key: obj
            for key, obj in remote_objects(client, bucket, prefix).items()
            if not _excluded(key[len(prefix):], exclude_prefixes)
        }

        for key, path in files.items():
            if _unchanged(path, remote.get(key)):
                summary.unchanged += 1
                continue
            client.upload_file(
                str(path),
                bucket,
                key,
                ExtraArgs={"ContentType": _content_type(path), "CacheControl": cache_control},
            )
            summary.uploaded.append(key)

        if delete:
            stale = sorted(set(remote) - set(files))
            failed: list[str] = []
            for i in range(0, len(stale), DELETE_BATCH):
                batch = stale[i:i + DELETE_BATCH]
                resp = client.delete_objects(
                    Bucket=bucket,
                    Delete={"Objects": [{"Key": k} for k in batch], "Quiet": True},
                )
                errors = resp.get("Errors", [])
                failed.extend(f"{e.get('Key')} ({e.get('Code')})" for e in errors)
                rejected = {e.get("Key") for e in errors}
                summary.deleted.extend(k for k in batch if k not in rejected)
            if failed:
                raise SyncError(
                    f"Could not delete {len(failed)} stale object(s) from s3://{bucket}: {', '.join(failed)}"
                )
    except ClientError as exc:
        raise SyncError(f"Sync of {source} to s3://{bucket}/{prefix} failed: {exc}") from exc

    logger.info(
        "s3://%s/%s: %d uploaded, %d deleted, %d unchanged",
        bucket, prefix, len(summary.uploaded), len(summary.deleted), summary.unchanged,
    )
    return summary


def sync_website(client: Any, build_dir: str | Path, bucket: str) -> list[SyncSummary]:
    """Sync a website build: pages uncached, fingerprinted ``static/`` cached for a year."""
    build = Path(build_dir)
    summaries = [
        sync_directory(
            client, build, bucket, cache_control=NO_CACHE, exclude_prefixes=(STATIC_PREFIX,)
        )
    ]
    static_dir = build / STATIC_PREFIX.rstrip("/")
    if static_dir.is_dir():
        summaries.append(
            sync_directory(client, static_dir, bucket, prefix=STATIC_PREFIX, cache_control=LONG_CACHE)
        )
    return summaries
