"""Render dashboard widget specs as CloudWatch constructs."""

from __future__ import annotations

from aws_cdk import Duration
from aws_cdk import aws_cloudwatch as cw
from constructs import Construct

from frontweb.models.dashboard import (
    ExpressionSpec,
    GraphWidgetSpec,
    MetricSpec,
    TextWidgetSpec,
    WidgetSpec,
)
from frontweb.planning.dashboard import (
    METRIC_NAMESPACE,
    METRIC_REGION,
    dashboard_widgets,
    metric_dimensions,
)


def render_metric(spec: MetricSpec | ExpressionSpec, distribution_id: str) -> cw.IMetric:
    if isinstance(spec, ExpressionSpec):
        return cw.MathExpression(
            expression=spec.expression,
            label=spec.label,
            using_metrics={
                name: render_metric(metric, distribution_id) for name, metric in spec.using.items()
            },
        )
    return cw.Metric(
        namespace=METRIC_NAMESPACE,
        metric_name=spec.metric_name,
        statistic=spec.statistic,
        label=spec.label,
        period=Duration.seconds(spec.period_seconds),
        dimensions_map=metric_dimensions(distribution_id),
    )


def render_widget(spec: WidgetSpec, distribution_id: str) -> cw.IWidget:
    if isinstance(spec, TextWidgetSpec):
        return cw.TextWidget(markdown=spec.markdown, width=spec.width, height=spec.height)
    if isinstance(spec, GraphWidgetSpec):
        return cw.GraphWidget(
            title=spec.title,
            width=spec.width,
            height=spec.height,
            region=METRIC_REGION,
            left=[render_metric(m, distribution_id) for m in spec.left],
        )
    raise TypeError(f"Unsupported widget spec: {type(spec).__name__}")


def build_dashboard(scope: Construct, construct_id: str, distribution_id: str) -> cw.Dashboard:
    """Create the CloudFront dashboard for one distribution."""
    dashboard = cw.Dashboard(scope, construct_id)
    dashboard.add_widgets(*(render_widget(w, distribution_id) for w in dashboard_widgets()))
    return dashboard
