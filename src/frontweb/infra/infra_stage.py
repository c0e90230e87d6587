"""Deployable unit wrapping one site's hosting stack."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from aws_cdk import CfnOutput, Stage
from constructs import Construct

from frontweb.infra.web_stack import WebStack
from frontweb.models.hosting import OutputField, SiteHostingResult
from frontweb.models.stage import HostingConfig
from frontweb.planning.certificates import resolve_for


class InfraStage(Stage):
    """One environment's infrastructure, deployable by the pipeline or locally."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        hosting: HostingConfig,
        website_output_dir: str | Path,
        strict_domains: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        certificate = resolve_for(hosting, stage=construct_id, strict=strict_domains)
        self.web = WebStack(
            self,
            "WebStack",
            certificate=certificate,
            website_output_dir=website_output_dir,
        )

    @property
    def hosting(self) -> SiteHostingResult:
        return self.web.hosting

    @property
    def outputs(self) -> dict[OutputField, CfnOutput]:
        return self.web.outputs
