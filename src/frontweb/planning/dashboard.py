"""CloudFront observability dashboard layout."""

from __future__ import annotations

from frontweb.models.dashboard import (
    ExpressionSpec,
    GraphWidgetSpec,
    MetricSpec,
    TextWidgetSpec,
    WidgetSpec,
)

GRID_WIDTH = 24
METRIC_NAMESPACE = "AWS/CloudFront"
METRIC_REGION = "us-east-1"  # CloudFront publishes metrics in the global region

EDGE_ERROR_RATE_EXPRESSION = "(m4+m5+m6)/m7*100"
EDGE_ERROR_RATE_LABEL = "5xxErrorByLambdaEdge"


def metric_dimensions(distribution_id: str) -> dict[str, str]:
    return {"Region": "Global", "DistributionId": distribution_id}


def edge_error_rate(
    execution_errors: float,
    validation_errors: float,
    limit_exceeded_errors: float,
    requests: float,
) -> float:
    """Percentage of requests failed by edge functions.

    Mirrors ``EDGE_ERROR_RATE_EXPRESSION``; zero requests is not special-cased.
    """
    return (execution_errors + validation_errors + limit_exceeded_errors) / requests * 100


def dashboard_widgets() -> list[WidgetSpec]:
    """The fixed widget set shown for every distribution."""
    requests = MetricSpec(metric_name="Requests", statistic="Sum")
    return [
        TextWidgetSpec(markdown="# Cloudfront Metrics", width=GRID_WIDTH, height=1),
        GraphWidgetSpec(title="Requests (sum)", width=12, height=9, left=(requests,)),
        GraphWidgetSpec(
            title="Data transfer",
            width=12,
            height=9,
            left=(
                MetricSpec(metric_name="BytesUploaded", statistic="Sum"),
                MetricSpec(metric_name="BytesDownloaded", statistic="Sum"),
            ),
        ),
        GraphWidgetSpec(
            title="Error rate (as a percentage of total requests)",
            width=24,
            height=6,
            left=(
                MetricSpec(metric_name="TotalErrorRate", statistic="Average"),
                MetricSpec(metric_name="4xxErrorRate", statistic="Average", label="Total4xxErrors"),
                MetricSpec(metric_name="5xxErrorRate", statistic="Average", label="Total5xxErrors"),
                ExpressionSpec(
                    expression=EDGE_ERROR_RATE_EXPRESSION,
                    label=EDGE_ERROR_RATE_LABEL,
                    using={
                        "m4": MetricSpec(metric_name="LambdaExecutionError", statistic="Sum"),
                        "m5": MetricSpec(metric_name="LambdaValidationError", statistic="Sum"),
                        "m6": MetricSpec(metric_name="LambdaLimitExceededErrors", statistic="Sum"),
                        "m7": requests,
                    },
                ),
            ),
        ),
    ]
