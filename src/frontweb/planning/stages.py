"""Stage wiring: hosting outputs feed each stage's post-deploy actions."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from frontweb.models.hosting import OutputField, SiteHostingResult
from frontweb.models.plan import PolicyGrant, PostDeployAction, StagePlan
from frontweb.models.stage import StageEnvironment

logger = logging.getLogger(__name__)

WEB_SYNC_STEP = "Web Sync"
FUNCTIONAL_TEST_STEP = "Functional Testing"

DEPLOY_TOOLS_INSTALL = ("pip install .",)
WEB_SYNC_COMMANDS = ("make configure-ui", "make web-sync", "make invalidate-distribution")
UI_TEST_INSTALL = ("cd website && yarn install --frozen-lockfile",)
FUNCTIONAL_TEST_COMMANDS = ("make test-ui",)

BUCKET_WRITE_ACTIONS = (
    "s3:List*",
    "s3:Abort*",
    "s3:GetObject*",
    "s3:PutObject*",
    "s3:DeleteObject*",
)
LIST_EXPORTS_ACTION = "cloudformation:ListExports"
ASSUME_ROLE_ACTION = "sts:assumeRole"

HostingFactory = Callable[[StageEnvironment], SiteHostingResult]


def web_sync_action(hosting: SiteHostingResult) -> PostDeployAction:
    return PostDeployAction(
        name=WEB_SYNC_STEP,
        commands=WEB_SYNC_COMMANDS,
        install_commands=DEPLOY_TOOLS_INSTALL,
        env_from_outputs={
            "WEB_BUCKET_NAME": OutputField.BUCKET_NAME,
            "DISTRIBUTION_ID": OutputField.DISTRIBUTION_ID,
        },
        grants=(
            PolicyGrant(
                actions=BUCKET_WRITE_ACTIONS,
                resources=(hosting.bucket_arn, f"{hosting.bucket_arn}/*"),
            ),
            PolicyGrant(actions=(LIST_EXPORTS_ACTION,), resources=("*",)),
        ),
    )


def functional_test_action(stage: StageEnvironment) -> PostDeployAction:
    grants: tuple[PolicyGrant, ...] = ()
    if stage.testing_role_arn:
        grants = (PolicyGrant(actions=(ASSUME_ROLE_ACTION,), resources=(stage.testing_role_arn,)),)
    return PostDeployAction(
        name=FUNCTIONAL_TEST_STEP,
        commands=FUNCTIONAL_TEST_COMMANDS,
        install_commands=UI_TEST_INSTALL,
        env_from_outputs={"WEB_URL": OutputField.WEBSITE_URL},
        grants=grants,
    )


def plan_stage(stage: StageEnvironment, hosting: SiteHostingResult) -> StagePlan:
    """Build the post-deploy actions for a stage from its hosting outputs."""
    actions = [web_sync_action(hosting)]
    if stage.testing:
        actions.append(functional_test_action(stage))
    return StagePlan(stage=stage, hosting=hosting, actions=tuple(actions))


def wire_stages(stages: Iterable[StageEnvironment], instantiate: HostingFactory) -> list[StagePlan]:
    """Instantiate hosting for each stage in order, then plan its actions.

    An empty stage list gives an empty plan; no default stage is added.
    """
    plans: list[StagePlan] = []
    for stage in stages:
        hosting = instantiate(stage)
        plan = plan_stage(stage, hosting)
        logger.debug("Stage %s wired with %d post-deploy actions", stage.name, len(plan.actions))
        plans.append(plan)
    if not plans:
        logger.warning("No stages configured; the pipeline has no deployment targets")
    return plans
