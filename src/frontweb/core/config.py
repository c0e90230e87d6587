"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from frontweb.core.exceptions import ConfigurationError
from frontweb.models.stage import HostingConfig, PipelineConfig

DEFAULT_PROJECT_NAME = "BlueprintCdkFrontWeb"
DEFAULT_REGION = "eu-west-1"


class AWSConfig(BaseSettings):
    """Shared boto3 client configuration."""

    model_config = {"env_prefix": "FRONTWEB_AWS_"}

    endpoint_url: str | None = None  # LocalStack override


class DeployConfig(BaseSettings):
    """Deploy-tool inputs injected by the pipeline's post-deploy steps."""

    # Unprefixed: CodeBuild exports these names from the stage outputs.
    model_config = {"env_prefix": ""}

    web_bucket_name: str = ""
    distribution_id: str = ""
    web_build_dir: str = "website/build"
    web_project_dir: str = "website"
    aws_region: str | None = None  # set by CodeBuild; drives aws_cognito_region


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "FRONTWEB_"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"

    project_name: str = DEFAULT_PROJECT_NAME
    region: str = DEFAULT_REGION
    pipeline_stack_name: str | None = None
    config_dir: str = "config"
    strict_domains: bool = False

    aws: AWSConfig = Field(default_factory=AWSConfig)
    deploy: DeployConfig = Field(default_factory=DeployConfig)

    @property
    def pipeline_stack(self) -> str:
        return self.pipeline_stack_for(self.project_name)

    def pipeline_stack_for(self, project_name: str) -> str:
        return self.pipeline_stack_name or f"{project_name}-Pipeline"

    def pipeline_overrides(self) -> dict[str, str]:
        """``projectName``/``region`` for the fields set explicitly, from env or init."""
        explicit = self.model_fields_set
        fields = {"project_name": "projectName", "region": "region"}
        return {alias: getattr(self, name) for name, alias in fields.items() if name in explicit}

    @property
    def dev_stage(self) -> str:
        return f"{self.project_name}-Dev"


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data


def load_pipeline_config(
    path: str | Path, defaults: dict[str, Any] | None = None, **overrides: Any
) -> PipelineConfig:
    """Load the pipeline configuration record (``infra-config.json``).

    ``defaults`` fill fields the file leaves out. Keyword overrides are merged
    over the file contents, the way the CDK app injects ``projectName`` and
    ``region`` from the environment; ``None`` overrides are skipped.
    """
    data = _read_json(Path(path))
    for key, value in (defaults or {}).items():
        data.setdefault(key, value)
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return PipelineConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid pipeline config {path}: {exc}") from exc


def load_hosting_config(path: str | Path) -> HostingConfig:
    """Load a single-environment hosting configuration (``local-config.json``)."""
    data = _read_json(Path(path))
    try:
        return HostingConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid hosting config {path}: {exc}") from exc
