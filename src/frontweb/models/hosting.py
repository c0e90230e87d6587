"""Hosting outputs and certificate selection models."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class OutputField(StrEnum):
    """Hosting outputs a post-deploy action may read from its stage."""

    BUCKET_NAME = "bucket_name"
    BUCKET_ARN = "bucket_arn"
    DISTRIBUTION_ID = "distribution_id"
    WEBSITE_URL = "website_url"


class SiteHostingResult(BaseModel):
    """Outputs of an instantiated hosting definition."""

    model_config = ConfigDict(frozen=True)

    bucket_name: str
    bucket_arn: str
    distribution_id: str
    website_url: str

    def get(self, field: OutputField) -> str:
        return getattr(self, field.value)


class ImportedCertificate(BaseModel):
    """An existing ACM certificate referenced by ARN."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["imported"] = "imported"
    certificate_arn: str
    domain_name: str


class ZoneValidatedCertificate(BaseModel):
    """A certificate issued for the domain and DNS-validated in its hosted zone."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["zone_validated"] = "zone_validated"
    hosted_zone_id: str
    domain_name: str


class NoCertificate(BaseModel):
    """No custom domain; the distribution serves its generated domain only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


CertificateSelection = Union[ImportedCertificate, ZoneValidatedCertificate, NoCertificate]
