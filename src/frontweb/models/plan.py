"""Post-deploy wiring plan for pipeline stages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from frontweb.models.hosting import OutputField, SiteHostingResult
from frontweb.models.stage import StageEnvironment


class PolicyGrant(BaseModel):
    """An IAM policy statement granted to a post-deploy action's role."""

    model_config = ConfigDict(frozen=True)

    actions: tuple[str, ...]
    resources: tuple[str, ...]


class PostDeployAction(BaseModel):
    """A build step run after a stage's resources are provisioned."""

    model_config = ConfigDict(frozen=True)

    name: str
    commands: tuple[str, ...]
    install_commands: tuple[str, ...] = ()
    env_from_outputs: dict[str, OutputField] = Field(default_factory=dict)
    grants: tuple[PolicyGrant, ...] = ()


class StagePlan(BaseModel):
    """A stage, its hosting outputs and its ordered post-deploy actions."""

    model_config = ConfigDict(frozen=True)

    stage: StageEnvironment
    hosting: SiteHostingResult
    actions: tuple[PostDeployAction, ...] = ()

    def action(self, name: str) -> PostDeployAction | None:
        return next((a for a in self.actions if a.name == name), None)
