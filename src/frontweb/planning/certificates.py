"""Certificate strategy selection for a hosting definition."""

from __future__ import annotations

import logging

from frontweb.core.exceptions import IncompleteDomainConfigError
from frontweb.models.hosting import (
    CertificateSelection,
    ImportedCertificate,
    NoCertificate,
    ZoneValidatedCertificate,
)
from frontweb.models.stage import HostingConfig

logger = logging.getLogger(__name__)


def resolve_certificate(
    domain_name: str | None = None,
    hosted_zone_id: str | None = None,
    certificate_arn: str | None = None,
    *,
    stage: str = "",
    strict: bool = False,
) -> CertificateSelection:
    """Pick the certificate source for a custom domain.

    An imported certificate wins over a zone-validated one. Any incomplete
    combination resolves to ``NoCertificate`` with a warning, or raises
    ``IncompleteDomainConfigError`` when ``strict`` is set.
    """
    if certificate_arn and domain_name:
        return ImportedCertificate(certificate_arn=certificate_arn, domain_name=domain_name)
    if hosted_zone_id and domain_name:
        return ZoneValidatedCertificate(hosted_zone_id=hosted_zone_id, domain_name=domain_name)

    missing = _missing_inputs(domain_name, hosted_zone_id, certificate_arn)
    if missing:
        if strict:
            raise IncompleteDomainConfigError(stage, missing)
        logger.warning(
            "Stage %r: custom domain disabled, missing %s", stage, ", ".join(missing)
        )
    return NoCertificate()


def resolve_for(config: HostingConfig, *, stage: str = "", strict: bool = False) -> CertificateSelection:
    return resolve_certificate(
        domain_name=config.domain_name,
        hosted_zone_id=config.hosted_zone_id,
        certificate_arn=config.certificate_arn,
        stage=stage,
        strict=strict,
    )


def _missing_inputs(
    domain_name: str | None, hosted_zone_id: str | None, certificate_arn: str | None
) -> list[str]:
    """Inputs needed to complete a partially configured domain; empty when none was given."""
    if domain_name:
        return ["certificateArn or hostedZoneId"]
    if certificate_arn or hosted_zone_id:
        return ["domainName"]
    return []
