"""Print the post-deploy wiring of each configured stage without synthesizing.

Usage:
    python scripts/plan_stages.py --config config/infra-config.json
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from frontweb.core.config import load_pipeline_config
from frontweb.models.hosting import SiteHostingResult
from frontweb.models.plan import StagePlan
from frontweb.models.stage import StageEnvironment
from frontweb.planning.certificates import resolve_for
from frontweb.planning.stages import wire_stages


def placeholder_hosting(stage: StageEnvironment) -> SiteHostingResult:
    """Hosting outputs as named at synth time; ids are only known after deploy."""
    bucket_name = f"{stage.name.lower()}-webstack-web"
    return SiteHostingResult(
        bucket_name=bucket_name,
        bucket_arn=f"arn:aws:s3:::{bucket_name}",
        distribution_id=f"<{stage.name}.DistributionId>",
        website_url=f"<{stage.name}.WebUrl>",
    )


def describe(plan: StagePlan) -> dict[str, Any]:
    certificate = resolve_for(plan.stage, stage=plan.stage.name)
    return {
        "stage": plan.stage.name,
        "certificate": certificate.kind,
        "bucket": plan.hosting.bucket_name,
        "actions": [
            {
                "name": action.name,
                "commands": list(action.commands),
                "env": {k: v.value for k, v in action.env_from_outputs.items()},
                "grants": [g.model_dump(mode="json") for g in action.grants],
            }
            for action in plan.actions
        ],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the stage wiring for a pipeline config")
    parser.add_argument("--config", default="config/infra-config.json", help="Pipeline config file")
    parser.add_argument("--project-name", default="BlueprintCdkFrontWeb", help="Project name")
    parser.add_argument("--region", default="eu-west-1", help="AWS region")
    args = parser.parse_args()

    config = load_pipeline_config(args.config, projectName=args.project_name, region=args.region)
    plans = wire_stages(config.stages, placeholder_hosting)
    print(json.dumps([describe(p) for p in plans], indent=2))


if __name__ == "__main__":
    main()
