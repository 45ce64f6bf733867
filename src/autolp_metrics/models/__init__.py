# src/autolp_metrics/models/__init__.py
from .subgraph import Token, PoolSnapshot, Transaction, LiquidityEvent
from .metrics import (
    PositionSize,
    EntryData,
    CurrentData,
    ImpermanentLossResult,
    PositionMetrics,
)

__all__ = [
    "Token", "PoolSnapshot", "Transaction", "LiquidityEvent",
    "PositionSize", "EntryData", "CurrentData", "ImpermanentLossResult", "PositionMetrics",
]
