"""Static website hosting stack: S3 origin behind CloudFront."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from aws_cdk import CfnOutput, Duration, Stack
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3deploy
from constructs import Construct

from frontweb.infra.dashboard import build_dashboard
from frontweb.models.hosting import (
    CertificateSelection,
    ImportedCertificate,
    NoCertificate,
    OutputField,
    SiteHostingResult,
    ZoneValidatedCertificate,
)

GLOBAL_REGION = "us-east-1"


class WebStack(Stack):
    """Bucket, distribution, optional custom domain and dashboard for one site."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        certificate: CertificateSelection = NoCertificate(),
        website_output_dir: str | Path,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        oai = cloudfront.OriginAccessIdentity(
            self, "cloudfront-OAI", comment=f"OAI for {self.stack_name}"
        )

        access_logs_bucket = s3.Bucket(
            self,
            "WebAccessLogsBucket",
            versioned=True,
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            server_access_logs_prefix="webAccessLogsBucket/",
        )

        self.bucket_name = f"{self.stack_name.lower()}-web"
        self.website_bucket = s3.Bucket(
            self,
            "WebBucket",
            bucket_name=self.bucket_name,
            public_read_access=False,
            versioned=True,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            server_access_logs_prefix="websiteBucket/",
            server_access_logs_bucket=access_logs_bucket,
        )
        self.website_bucket.grant_read(oai)

        acm_certificate, hosted_zone = self._bind_certificate(certificate)
        domain_names = [] if isinstance(certificate, NoCertificate) else [certificate.domain_name]

        self.distribution = cloudfront.Distribution(
            self,
            "WebDistribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.S3BucketOrigin.with_origin_access_identity(
                    self.website_bucket, origin_access_identity=oai
                ),
                compress=True,
                allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            ),
            minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
            error_responses=[
                cloudfront.ErrorResponse(
                    http_status=403,
                    response_http_status=403,
                    response_page_path="/error.html",
                    ttl=Duration.minutes(30),
                )
            ],
            certificate=acm_certificate,
            domain_names=domain_names or None,
            price_class=cloudfront.PriceClass.PRICE_CLASS_100,
        )

        if hosted_zone is not None:
            route53.ARecord(
                self,
                "APIAliasRecord",
                zone=hosted_zone,
                record_name=certificate.domain_name,
                target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(self.distribution)),
                ttl=Duration.minutes(15),
            )

        s3deploy.BucketDeployment(
            self,
            "DeployWebsite",
            sources=[s3deploy.Source.asset(str(website_output_dir))],
            destination_bucket=self.website_bucket,
            memory_limit=3000,
            prune=False,
            distribution=self.distribution,
        )

        site_domain = domain_names[0] if domain_names else self.distribution.distribution_domain_name

        self.distribution_id_output = CfnOutput(
            self, "DistributionId", value=self.distribution.distribution_id
        )
        self.distribution_url_output = CfnOutput(
            self, "DistributionUrl", value=self.distribution.distribution_domain_name
        )
        self.bucket_name_output = CfnOutput(
            self, "WebBucketName", value=self.website_bucket.bucket_name
        )
        self.bucket_arn_output = CfnOutput(
            self, "WebBucketArn", value=self.website_bucket.bucket_arn
        )
        self.web_url_output = CfnOutput(self, "WebUrl", value=f"https://{site_domain}")

        build_dashboard(self, "WebDashboard", self.distribution.distribution_id)

    def _bind_certificate(
        self, selection: CertificateSelection
    ) -> tuple[acm.ICertificate | None, route53.IHostedZone | None]:
        if isinstance(selection, ImportedCertificate):
            cert = acm.Certificate.from_certificate_arn(
                self, "CertificateImported", selection.certificate_arn
            )
            return cert, None
        if isinstance(selection, ZoneValidatedCertificate):
            zone = route53.HostedZone.from_hosted_zone_attributes(
                self,
                "HostedZone",
                hosted_zone_id=selection.hosted_zone_id,
                zone_name=selection.domain_name,
            )
            cert = acm.DnsValidatedCertificate(
                self,
                "Certificate",
                domain_name=selection.domain_name,
                hosted_zone=zone,
                region=GLOBAL_REGION,
            )
            return cert, zone
        return None, None

    @property
    def hosting(self) -> SiteHostingResult:
        """Outputs consumed by this site's post-deploy actions.

        The bucket name is fixed at synth time, so its ARN is a plain string
        usable from the pipeline stack without a cross-stage reference.
        """
        return SiteHostingResult(
            bucket_name=self.bucket_name,
            bucket_arn=f"arn:aws:s3:::{self.bucket_name}",
            distribution_id=self.distribution_id_output.value,
            website_url=self.web_url_output.value,
        )

    @property
    def outputs(self) -> dict[OutputField, CfnOutput]:
        return {
            OutputField.BUCKET_NAME: self.bucket_name_output,
            OutputField.BUCKET_ARN: self.bucket_arn_output,
            OutputField.DISTRIBUTION_ID: self.distribution_id_output,
            OutputField.WEBSITE_URL: self.web_url_output,
        }
