# src/autolp_metrics/core/interfaces.py
from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from ..models.subgraph import LiquidityEvent, PoolSnapshot


@runtime_checkable
class LiquidityDataSource(Protocol):
    """
    Colaborador externo que entrega los eventos de liquidez y el estado del pool.

    - Los eventos llegan ordenados del más reciente al más antiguo.
    - Los fallos de red o de la API se propagan como excepciones.
    """

    async def fetch_events(self, user_address: str, pool_address: str) -> List[LiquidityEvent]:
        ...

    async def fetch_current_pool_state(self, pool_address: str) -> PoolSnapshot:
        ...


@runtime_checkable
class UserEventsSource(LiquidityDataSource, Protocol):
    """Fuente que además puede listar los eventos de un usuario en todos sus pools."""

    async def fetch_all_user_events(self, user_address: str) -> List[LiquidityEvent]:
        ...
