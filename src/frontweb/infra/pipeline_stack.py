"""Self-mutating delivery pipeline deploying one InfraStage per configured stage."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from aws_cdk import Environment, Stack, Token
from aws_cdk import aws_iam as iam
from aws_cdk import pipelines
from constructs import Construct

from frontweb.infra.infra_stage import InfraStage
from frontweb.models.hosting import SiteHostingResult
from frontweb.models.plan import PolicyGrant, PostDeployAction, StagePlan
from frontweb.models.stage import PipelineConfig, StageEnvironment
from frontweb.planning.stages import wire_stages

SYNTH_INSTALL_COMMANDS = ["make install"]
SYNTH_COMMANDS = ["make lint", "make build", "CI=true make test", "make synth"]
SYNTH_OUTPUT_DIR = "cdk.out"


def to_policy_statement(grant: PolicyGrant) -> iam.PolicyStatement:
    return iam.PolicyStatement(actions=list(grant.actions), resources=list(grant.resources))


class PipelineStack(Stack):
    """CodePipeline sourced from a CodeStar connection.

    Each stage deploys its hosting stack and then runs the post-deploy
    actions planned from that stage's own outputs.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        config: PipelineConfig,
        website_asset_dir: str | Path | None = None,
        strict_domains: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)
        self._website_asset_dir = website_asset_dir or config.web_output_dir
        self._strict_domains = strict_domains
        self.infra_stages: dict[str, InfraStage] = {}

        self._source = source = pipelines.CodePipelineSource.connection(
            config.repository_name,
            config.branch_name,
            connection_arn=config.connection_arn,
        )

        self.synth_step = pipelines.ShellStep(
            "Synth",
            input=source,
            install_commands=SYNTH_INSTALL_COMMANDS,
            commands=SYNTH_COMMANDS,
            primary_output_directory=SYNTH_OUTPUT_DIR,
        )

        self.pipeline = pipelines.CodePipeline(
            self,
            "pipeline",
            self_mutation=config.self_mutating,
            cross_account_keys=True,  # required for cross-account deployments
            synth=self.synth_step,
        )
        self._web_output_dir = config.web_output_dir
        self._web_output = self.synth_step.add_output_directory(config.web_output_dir)

        self.plans = wire_stages(config.stages, self._instantiate)
        for plan in self.plans:
            self._add_stage(plan)

    def _instantiate(self, stage: StageEnvironment) -> SiteHostingResult:
        infra = InfraStage(
            self,
            stage.name,
            hosting=stage,
            website_output_dir=self._website_asset_dir,
            strict_domains=self._strict_domains,
            env=self._stage_env(),
        )
        self.infra_stages[stage.name] = infra
        return infra.hosting

    def _stage_env(self) -> Environment | None:
        """Deploy stages into the pipeline's own account and region when known."""
        if Token.is_unresolved(self.account) or Token.is_unresolved(self.region):
            return None
        return Environment(account=self.account, region=self.region)

    def _add_stage(self, plan: StagePlan) -> pipelines.StageDeployment:
        infra = self.infra_stages[plan.stage.name]
        return self.pipeline.add_stage(
            infra,
            post=[self._build_step(action, infra) for action in plan.actions],
        )

    def _build_step(self, action: PostDeployAction, infra: InfraStage) -> pipelines.CodeBuildStep:
        outputs = infra.outputs
        return pipelines.CodeBuildStep(
            action.name,
            input=self._source,
            additional_inputs={self._web_output_dir: self._web_output},
            install_commands=list(action.install_commands),
            env_from_cfn_outputs={env: outputs[field] for env, field in action.env_from_outputs.items()},
            commands=list(action.commands),
            role_policy_statements=[to_policy_statement(g) for g in action.grants],
        )
