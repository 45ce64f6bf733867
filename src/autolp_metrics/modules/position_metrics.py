# src/autolp_metrics/modules/position_metrics.py
import asyncio
import logging
from typing import Any, Awaitable, Dict, List, Sequence

from ..core.exceptions import MetricsComputationError, NoPositionDataError
from ..core.interfaces import LiquidityDataSource, UserEventsSource
from ..models.metrics import PositionMetrics
from ..models.subgraph import LiquidityEvent, PoolSnapshot
from .calculations import (
    calculate_entry_data,
    calculate_impermanent_loss,
    calculate_position_size,
    get_current_data,
)

logger = logging.getLogger(__name__)


async def gather_or_cancel(*aws: Awaitable[Any]) -> List[Any]:
    """
    Como `asyncio.gather`, pero si una lectura falla cancela las demás y espera
    a que terminen antes de propagar el error.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def build_position_metrics(events: Sequence[LiquidityEvent], current_pool: PoolSnapshot) -> PositionMetrics:
    """
    Calcula las métricas a partir de los eventos (del más reciente al más antiguo)
    y del estado actual del pool. No hace I/O. Sin eventos lanza NoPositionDataError.
    """
    position_size = calculate_position_size(events)
    entry_data = calculate_entry_data(events)
    # El evento más reciente define el rango de ticks
    current_data = get_current_data(current_pool, events[0])
    impermanent_loss = calculate_impermanent_loss(position_size, entry_data, current_data)

    return PositionMetrics(
        position_size=position_size,
        impermanent_loss=impermanent_loss,
        entry_data=entry_data,
        current_data=current_data,
    )


class PositionMetricsService:
    """Orquesta la obtención de datos externos y el cálculo de métricas de una posición."""

    def __init__(self, data_source: LiquidityDataSource):
        self.data_source = data_source

    async def compute_position_metrics(self, user_address: str, pool_address: str) -> PositionMetrics:
        try:
            events, current_pool = await gather_or_cancel(
                self.data_source.fetch_events(user_address, pool_address),
                self.data_source.fetch_current_pool_state(pool_address),
            )
        except Exception as e:
            logger.error(f"Error al obtener datos para {user_address} en el pool {pool_address}: {e}")
            raise MetricsComputationError(e) from e

        metrics = build_position_metrics(events, current_pool)
        logger.info(
            f"Métricas calculadas para {user_address} en {pool_address}: "
            f"Depositado=${metrics.entry_data.total_deposited_usd:.2f}, "
            f"Retirado=${metrics.entry_data.total_withdrawn_usd:.2f}, "
            f"En rango={metrics.current_data.is_in_range}, IL={metrics.impermanent_loss.percentage:.2f}%"
        )
        return metrics

    async def compute_user_metrics(self, user_address: str) -> Dict[str, PositionMetrics]:
        """Métricas de cada pool en el que el usuario modificó liquidez, indexadas por pool."""
        if not isinstance(self.data_source, UserEventsSource):
            raise TypeError("La fuente de datos no soporta fetch_all_user_events.")

        try:
            all_events = await self.data_source.fetch_all_user_events(user_address)
        except Exception as e:
            logger.error(f"Error al obtener los eventos de {user_address}: {e}")
            raise MetricsComputationError(e) from e

        if not all_events:
            raise NoPositionDataError("No position data found for this user")

        events_by_pool: Dict[str, List[LiquidityEvent]] = {}
        for event in all_events:
            events_by_pool.setdefault(event.pool.id, []).append(event)

        pool_ids = list(events_by_pool)
        try:
            pools = await gather_or_cancel(
                *(self.data_source.fetch_current_pool_state(pool_id) for pool_id in pool_ids)
            )
        except Exception as e:
            logger.error(f"Error al obtener el estado de los pools de {user_address}: {e}")
            raise MetricsComputationError(e) from e

        results = {
            pool_id: build_position_metrics(events_by_pool[pool_id], pool)
            for pool_id, pool in zip(pool_ids, pools)
        }
        logger.info(f"Se calcularon métricas para {len(results)} pools de la wallet {user_address}")
        return results


async def compute_position_metrics(
    data_source: LiquidityDataSource, user_address: str, pool_address: str
) -> PositionMetrics:
    return await PositionMetricsService(data_source).compute_position_metrics(user_address, pool_address)
