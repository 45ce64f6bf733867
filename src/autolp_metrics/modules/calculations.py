# src/autolp_metrics/modules/calculations.py
from typing import List, Sequence, Tuple

from ..core.exceptions import NoPositionDataError
from ..models.metrics import CurrentData, EntryData, ImpermanentLossResult, PositionSize
from ..models.subgraph import LiquidityEvent, PoolSnapshot


def split_deposits_and_withdrawals(
    events: Sequence[LiquidityEvent],
) -> Tuple[List[LiquidityEvent], List[LiquidityEvent]]:
    """Separa depósitos (amount > 0) de retiros (amount < 0). Los eventos con amount 0 se ignoran."""
    deposits = [event for event in events if event.is_deposit]
    withdrawals = [event for event in events if event.is_withdrawal]
    return deposits, withdrawals


def calculate_position_size(events: Sequence[LiquidityEvent]) -> PositionSize:
    """
    Calcula el tamaño de la posición sumando solo los depósitos.
    Los retiros no se restan: es una estimación, no un libro contable.
    Los símbolos se leen del primer evento.
    """
    if not events:
        raise NoPositionDataError()

    deposits, _ = split_deposits_and_withdrawals(events)

    amount0 = sum(event.amount0 for event in deposits)
    amount1 = sum(event.amount1 for event in deposits)
    total_usd = sum(event.amount_usd for event in deposits)

    first_pool = events[0].pool
    return PositionSize(
        amount0=amount0,
        amount1=amount1,
        total_usd=total_usd,
        token0_symbol=first_pool.token0.symbol,
        token1_symbol=first_pool.token1.symbol,
    )


def calculate_entry_data(events: Sequence[LiquidityEvent]) -> EntryData:
    """
    Precio de entrada promedio ponderado por el monto en USD de cada depósito.
    Si el peso total es 0 los precios promedio quedan en 0.
    """
    deposits, withdrawals = split_deposits_and_withdrawals(events)

    total_deposited_usd = sum(event.amount_usd for event in deposits)
    total_withdrawn_usd = sum(abs(event.amount_usd) for event in withdrawals)

    weighted_price0_sum = 0.0
    weighted_price1_sum = 0.0
    total_weight = 0.0
    for event in deposits:
        weight = event.amount_usd
        # Los precios del pool en el momento del evento
        weighted_price0_sum += event.pool.token0_price * weight
        weighted_price1_sum += event.pool.token1_price * weight
        total_weight += weight

    if total_weight > 0:
        average_entry_price0 = weighted_price0_sum / total_weight
        average_entry_price1 = weighted_price1_sum / total_weight
    else:
        average_entry_price0 = 0.0
        average_entry_price1 = 0.0

    return EntryData(
        average_entry_price0=average_entry_price0,
        average_entry_price1=average_entry_price1,
        total_deposited_usd=total_deposited_usd,
        total_withdrawn_usd=total_withdrawn_usd,
    )


def is_tick_in_range(current_tick: int | None, tick_lower: int, tick_upper: int) -> bool:
    """Rango semiabierto [tick_lower, tick_upper): el límite superior no cuenta."""
    if current_tick is None:
        return False
    return tick_lower <= current_tick < tick_upper


def get_current_data(current_pool: PoolSnapshot, sample_event: LiquidityEvent) -> CurrentData:
    """Precios actuales del pool y estado del rango según los ticks del evento de muestra."""
    return CurrentData(
        current_price0=current_pool.token0_price,
        current_price1=current_pool.token1_price,
        is_in_range=is_tick_in_range(current_pool.tick, sample_event.tick_lower, sample_event.tick_upper),
    )


def calculate_impermanent_loss(
    position_size: PositionSize,
    entry_data: EntryData,
    current_data: CurrentData,
) -> ImpermanentLossResult:
    """
    Compara el valor de entrada con el valor actual de los tokens mantenidos.
    El valor "hold" se define igual al valor actual, por lo que la pérdida
    siempre resulta 0 con esta definición.
    """
    amount0, amount1 = position_size.amount0, position_size.amount1

    entry_value = (amount0 * entry_data.average_entry_price0) + (amount1 * entry_data.average_entry_price1)
    current_value = (amount0 * current_data.current_price0) + (amount1 * current_data.current_price1)
    # TODO: simular la estrategia hold con las cantidades depositadas al ratio de entrada
    hold_value = current_value

    loss_amount = current_value - hold_value
    percentage = (loss_amount / hold_value) * 100 if hold_value != 0 else 0.0

    return ImpermanentLossResult(
        percentage=percentage,
        entry_value=entry_value,
        current_value=current_value,
        hold_value=hold_value,
        loss_amount=loss_amount,
    )
