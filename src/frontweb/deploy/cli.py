"""Command line entry point for the post-deploy tools.

Usage:
    frontweb-deploy configure-ui [--project-dir website]
    frontweb-deploy web-sync [--build-dir website/build] [--bucket NAME]
    frontweb-deploy invalidate-distribution [--distribution-id ID] [--wait]
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Callable

from frontweb.core.config import AppSettings
from frontweb.core.exceptions import DeployToolError, FrontWebError
from frontweb.core.logging import configure_logging
from frontweb.deploy import aws_client
from frontweb.deploy.exports import list_exports
from frontweb.deploy.invalidation import invalidate_distribution
from frontweb.deploy.ui_config import collect_ui_values, render_ui_config, write_ui_config
from frontweb.deploy.web_sync import sync_website

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, AppSettings], Any]


def cmd_configure_ui(args: argparse.Namespace, settings: AppSettings, clients: ClientFactory) -> None:
    logger.info("Fetching deployment information")
    exports = list_exports(clients("cloudformation", settings))
    values = collect_ui_values(
        settings.project_name, settings.region, exports, cognito_region=settings.deploy.aws_region
    )
    write_ui_config(args.project_dir or settings.deploy.web_project_dir, render_ui_config(values))


def cmd_web_sync(args: argparse.Namespace, settings: AppSettings, clients: ClientFactory) -> None:
    bucket = args.bucket or settings.deploy.web_bucket_name
    if not bucket:
        raise DeployToolError("No bucket given (set WEB_BUCKET_NAME or pass --bucket)")
    sync_website(clients("s3", settings), args.build_dir or settings.deploy.web_build_dir, bucket)


def cmd_invalidate(args: argparse.Namespace, settings: AppSettings, clients: ClientFactory) -> None:
    invalidate_distribution(
        clients("cloudfront", settings),
        args.distribution_id or settings.deploy.distribution_id,
        wait=args.wait,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frontweb-deploy", description="Post-deploy tools for the web frontend")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("configure-ui", help="Render the UI runtime configuration from stack exports")
    p.add_argument("--project-dir", default=None, help="Website project directory")
    p.set_defaults(handler=cmd_configure_ui)

    p = sub.add_parser("web-sync", help="Sync the website build to its bucket")
    p.add_argument("--build-dir", default=None, help="Local build directory")
    p.add_argument("--bucket", default=None, help="Target bucket (default: WEB_BUCKET_NAME)")
    p.set_defaults(handler=cmd_web_sync)

    p = sub.add_parser("invalidate-distribution", help="Invalidate the CloudFront cache")
    p.add_argument("--distribution-id", default=None, help="Distribution id (default: DISTRIBUTION_ID)")
    p.add_argument("--wait", action="store_true", help="Wait for the invalidation to complete")
    p.set_defaults(handler=cmd_invalidate)

    return parser


def main(argv: list[str] | None = None, clients: ClientFactory = aws_client) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    configure_logging(settings.log_level)
    try:
        args.handler(args, settings, clients)
    except FrontWebError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
