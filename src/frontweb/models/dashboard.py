"""Dashboard widget specifications."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class MetricSpec(BaseModel):
    """A CloudFront metric, dimensioned per distribution at render time."""

    model_config = ConfigDict(frozen=True)

    metric_name: str
    statistic: str
    label: Optional[str] = None
    period_seconds: int = 300


class ExpressionSpec(BaseModel):
    """A metric math expression over named metrics."""

    model_config = ConfigDict(frozen=True)

    expression: str
    label: str
    using: dict[str, MetricSpec]


class TextWidgetSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    markdown: str
    width: int
    height: int


class GraphWidgetSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    width: int
    height: int
    left: tuple[Union[MetricSpec, ExpressionSpec], ...]


WidgetSpec = Union[TextWidgetSpec, GraphWidgetSpec]
