"""Shared test doubles for stage wiring."""

from __future__ import annotations

from frontweb.models.hosting import SiteHostingResult
from frontweb.models.stage import StageEnvironment


class RecordingHostingFactory:
    """Stands in for the CDK hosting stage; records instantiation order."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def __call__(self, stage: StageEnvironment) -> SiteHostingResult:
        self.calls.append(stage.name)
        bucket = f"{stage.name.lower()}-webstack-web"
        return SiteHostingResult(
            bucket_name=bucket,
            bucket_arn=f"arn:aws:s3:::{bucket}",
            distribution_id=f"DIST{len(self.calls)}",
            website_url=f"https://{stage.name.lower()}.example.com",
        )


__all__ = ["RecordingHostingFactory"]
