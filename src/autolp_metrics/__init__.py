# src/autolp_metrics/__init__.py
from .core.exceptions import (
    AutoLPError,
    MetricsComputationError,
    NoPositionDataError,
    SubgraphError,
)
from .models.metrics import PositionMetrics
from .modules.position_metrics import PositionMetricsService, compute_position_metrics
from .modules.subgraph_client import SubgraphClient

__all__ = [
    "AutoLPError",
    "MetricsComputationError",
    "NoPositionDataError",
    "SubgraphError",
    "PositionMetrics",
    "PositionMetricsService",
    "compute_position_metrics",
    "SubgraphClient",
]
