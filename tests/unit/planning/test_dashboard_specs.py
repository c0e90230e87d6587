"""Tests for the CloudFront dashboard layout and error-rate formula."""

from __future__ import annotations

import itertools

import pytest

from frontweb.models.dashboard import ExpressionSpec, GraphWidgetSpec, MetricSpec, TextWidgetSpec
from frontweb.planning.dashboard import (
    EDGE_ERROR_RATE_EXPRESSION,
    GRID_WIDTH,
    dashboard_widgets,
    edge_error_rate,
    metric_dimensions,
)

VALUES = [0, 1, 2.5, 10, 1000]


class TestEdgeErrorRate:
    @pytest.mark.parametrize("a,b,c,d", [(0, 0, 0, 1), (1, 2, 3, 6), (5, 0, 0, 50), (1, 1, 1, 3)])
    def test_matches_expression(self, a, b, c, d):
        assert edge_error_rate(a, b, c, d) == pytest.approx((a + b + c) / d * 100)

    def test_all_requests_failing_is_100_percent(self):
        assert edge_error_rate(10, 5, 5, 20) == pytest.approx(100.0)

    def test_non_decreasing_in_error_counts(self):
        d = 40
        for a, b, c in itertools.product(VALUES, repeat=3):
            base = edge_error_rate(a, b, c, d)
            assert edge_error_rate(a + 1, b, c, d) >= base
            assert edge_error_rate(a, b + 1, c, d) >= base
            assert edge_error_rate(a, b, c + 1, d) >= base

    def test_non_increasing_in_requests(self):
        for a, b, c in itertools.product(VALUES, repeat=3):
            for d in (1, 3, 7.5, 100):
                assert edge_error_rate(a, b, c, d + 1) <= edge_error_rate(a, b, c, d)

    def test_zero_requests_not_special_cased(self):
        with pytest.raises(ZeroDivisionError):
            edge_error_rate(1, 0, 0, 0)


class TestDashboardWidgets:
    def test_layout(self):
        widgets = dashboard_widgets()
        assert isinstance(widgets[0], TextWidgetSpec)
        assert widgets[0].markdown == "# Cloudfront Metrics"
        assert widgets[0].width == GRID_WIDTH
        assert [w.title for w in widgets[1:]] == [
            "Requests (sum)",
            "Data transfer",
            "Error rate (as a percentage of total requests)",
        ]
        assert [(w.width, w.height) for w in widgets[1:]] == [(12, 9), (12, 9), (24, 6)]

    def test_error_rate_expression_metrics(self):
        error_graph = dashboard_widgets()[-1]
        assert isinstance(error_graph, GraphWidgetSpec)
        expression = error_graph.left[-1]
        assert isinstance(expression, ExpressionSpec)
        assert expression.expression == EDGE_ERROR_RATE_EXPRESSION == "(m4+m5+m6)/m7*100"
        assert {k: m.metric_name for k, m in expression.using.items()} == {
            "m4": "LambdaExecutionError",
            "m5": "LambdaValidationError",
            "m6": "LambdaLimitExceededErrors",
            "m7": "Requests",
        }
        assert all(m.statistic == "Sum" for m in expression.using.values())

    def test_rate_metrics_are_averaged(self):
        error_graph = dashboard_widgets()[-1]
        rates = [m for m in error_graph.left if isinstance(m, MetricSpec)]
        assert [(m.metric_name, m.label) for m in rates] == [
            ("TotalErrorRate", None),
            ("4xxErrorRate", "Total4xxErrors"),
            ("5xxErrorRate", "Total5xxErrors"),
        ]
        assert {m.statistic for m in rates} == {"Average"}

    def test_widgets_are_distribution_independent(self):
        assert dashboard_widgets() == dashboard_widgets()


def test_metric_dimensions():
    assert metric_dimensions("E123") == {"Region": "Global", "DistributionId": "E123"}
