"""Pipeline and stage configuration models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _ConfigRecord(BaseModel):
    """Immutable record read from camelCase JSON config files."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class HostingConfig(_ConfigRecord):
    """Custom domain inputs for one hosting definition."""

    domain_name: Optional[str] = None
    hosted_zone_id: Optional[str] = None
    certificate_arn: Optional[str] = None


class StageEnvironment(HostingConfig):
    """One named deployment target of the pipeline."""

    name: str = Field(min_length=1)
    testing: bool = False
    testing_role_arn: Optional[str] = None


class PipelineConfig(_ConfigRecord):
    """The static configuration record read once by the pipeline app."""

    project_name: str
    region: str
    self_mutating: bool = True
    repository_name: str
    branch_name: str
    connection_arn: str
    web_output_dir: str = "website/build"
    stages: tuple[StageEnvironment, ...] = ()

    @field_validator("stages")
    @classmethod
    def _unique_stage_names(cls, stages: tuple[StageEnvironment, ...]) -> tuple[StageEnvironment, ...]:
        seen: set[str] = set()
        for stage in stages:
            if stage.name in seen:
                raise ValueError(f"duplicate stage name {stage.name!r}")
            seen.add(stage.name)
        return stages
