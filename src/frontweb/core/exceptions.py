"""frontweb exception hierarchy."""

from __future__ import annotations


class FrontWebError(Exception):
    """Base exception for all frontweb errors."""


class ConfigurationError(FrontWebError):
    """Configuration could not be read or is invalid."""


class IncompleteDomainConfigError(ConfigurationError):
    """A stage names a custom domain without a complete certificate source."""

    def __init__(self, stage: str, missing: list[str]) -> None:
        self.stage = stage
        self.missing = missing
        super().__init__(
            f"Stage {stage!r} has incomplete domain configuration: missing {', '.join(missing)}"
        )


class DeployToolError(FrontWebError):
    """A post-deploy tool failed."""


class SyncError(DeployToolError):
    """Syncing the build directory to S3 failed."""


class InvalidationError(DeployToolError):
    """CloudFront cache invalidation failed."""


class ExportLookupError(DeployToolError):
    """Listing CloudFormation exports failed."""
