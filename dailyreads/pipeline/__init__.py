"""Aggregation pipeline."""

from .aggregator import DailyArticlesAggregator
from .models import AggregationReport

__all__ = ["AggregationReport", "DailyArticlesAggregator"]
