"""CDK app entry points.

``python -m frontweb.apps pipeline`` synthesizes the delivery pipeline from
``config/infra-config.json``; ``python -m frontweb.apps local`` synthesizes a
single developer stage from ``config/local-config.json``.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import aws_cdk as cdk

from frontweb.core.config import AppSettings, load_hosting_config, load_pipeline_config
from frontweb.core.logging import configure_logging
from frontweb.infra.infra_stage import InfraStage
from frontweb.infra.pipeline_stack import PipelineStack

logger = logging.getLogger(__name__)


def pipeline_app(settings: AppSettings | None = None, app: cdk.App | None = None) -> cdk.App:
    settings = settings or AppSettings()
    app = app or cdk.App()
    # Explicit env settings override the file; otherwise the file wins over defaults.
    config = load_pipeline_config(
        Path(settings.config_dir) / "infra-config.json",
        defaults={"projectName": settings.project_name, "region": settings.region},
        **settings.pipeline_overrides(),
    )
    stack_name = settings.pipeline_stack_for(config.project_name)
    logger.info("Building %s with %d stage(s)", stack_name, len(config.stages))
    PipelineStack(
        app,
        stack_name,
        config=config,
        strict_domains=settings.strict_domains,
        env=cdk.Environment(region=config.region),
    )
    return app


def local_app(settings: AppSettings | None = None, app: cdk.App | None = None) -> cdk.App:
    settings = settings or AppSettings()
    app = app or cdk.App()
    hosting = load_hosting_config(Path(settings.config_dir) / "local-config.json")
    logger.info("Building developer stage %s", settings.dev_stage)
    InfraStage(
        app,
        settings.dev_stage,
        hosting=hosting,
        website_output_dir=settings.deploy.web_build_dir,
        strict_domains=settings.strict_domains,
        env=cdk.Environment(
            account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
            region=settings.region,
        ),
    )
    return app


APPS = {"pipeline": pipeline_app, "local": local_app}


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    name = args[0] if args else "pipeline"
    if name not in APPS:
        raise SystemExit(f"Unknown app {name!r}; expected one of {', '.join(APPS)}")
    settings = AppSettings()
    configure_logging(settings.log_level)
    APPS[name](settings).synth()


if __name__ == "__main__":
    main()
